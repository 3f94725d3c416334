import logging

from flask import Flask, jsonify, request

from passmeter.config import load_config
from passmeter.evaluator import evaluate

logger = logging.getLogger(__name__)

app = Flask(__name__)

@app.route('/')
def home():
    return jsonify({
        "message": "PassMeter API is running"
    })

@app.route('/example', methods=['GET'])
def example_route():
    cfg = load_config()
    return jsonify({'password': cfg["example_password"]})

@app.route('/score', methods=['POST'])
def score_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'expected a JSON object'}), 400
    if 'password' not in data:
        return jsonify({'error': 'password is required'}), 400
    password = data['password']
    if not isinstance(password, str):
        logger.info("rejected /score request with non-string password")
        return jsonify({'error': 'password must be a string'}), 400
    result = evaluate(password)
    return jsonify(result.to_dict())

if __name__ == "__main__":
    app.run(debug=True)
