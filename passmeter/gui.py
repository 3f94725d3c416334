# passmeter/gui.py
# PassMeter desktop window: live meter, show/hide toggle, copy example passphrase

import sys
from functools import partial

from PySide6.QtGui import QClipboard
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel,
    QLineEdit, QPushButton, QProgressBar, QListWidget, QMessageBox
)

from passmeter.config import load_config, save_config
from passmeter.display import copy_sample, feedback_lines, fill_style, format_entropy, format_score
from passmeter.evaluator import evaluate

# ---------------- UI building helpers ----------------

def make_meter_group(masked: bool):
    box = QWidget()
    layout = QVBoxLayout()
    box.setLayout(layout)

    lbl_input = QLabel("Type or paste a password (live evaluation):")
    input_pw = QLineEdit()
    input_pw.setEchoMode(QLineEdit.Password if masked else QLineEdit.Normal)
    btn_toggle = QPushButton("Show" if masked else "Hide")
    btn_toggle.setAccessibleName("Show password" if masked else "Hide password")

    row = QHBoxLayout()
    row.addWidget(input_pw, 1)
    row.addWidget(btn_toggle)

    meter = QProgressBar()
    meter.setRange(0, 100)
    meter.setTextVisible(False)

    lbl_label = QLabel("")
    lbl_score = QLabel("")
    lbl_entropy = QLabel("")
    lst_feedback = QListWidget()

    btn_copy = QPushButton("Copy example password")

    layout.addWidget(lbl_input)
    layout.addLayout(row)
    layout.addWidget(meter)
    layout.addWidget(lbl_label)
    layout.addWidget(lbl_score)
    layout.addWidget(lbl_entropy)
    layout.addWidget(QLabel("Feedback:"))
    layout.addWidget(lst_feedback)
    layout.addWidget(btn_copy)

    return {
        "widget": box,
        "input_pw": input_pw,
        "btn_toggle": btn_toggle,
        "meter": meter,
        "lbl_label": lbl_label,
        "lbl_score": lbl_score,
        "lbl_entropy": lbl_entropy,
        "lst_feedback": lst_feedback,
        "btn_copy": btn_copy,
    }


class PassMeterGUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("PassMeter — Password Strength")
        self.setMinimumSize(520, 420)

        self.cfg = load_config()
        self.example = self.cfg["example_password"]

        main = QVBoxLayout()
        self.setLayout(main)

        ui = make_meter_group(bool(self.cfg.get("mask_input", True)))
        main.addWidget(ui["widget"])

        ui["input_pw"].textChanged.connect(partial(self.on_password_changed, ui))
        ui["btn_toggle"].clicked.connect(partial(self.on_toggle_mask, ui))
        ui["btn_copy"].clicked.connect(self.on_copy_example)

        self.ui = ui
        # initial render
        self.on_password_changed(ui, "")

    def on_toggle_mask(self, ui):
        hidden = ui["input_pw"].echoMode() == QLineEdit.Password
        ui["input_pw"].setEchoMode(QLineEdit.Normal if hidden else QLineEdit.Password)
        ui["btn_toggle"].setText("Hide" if hidden else "Show")
        ui["btn_toggle"].setAccessibleName("Hide password" if hidden else "Show password")
        # remember the choice for next launch
        self.cfg["mask_input"] = not hidden
        save_config(self.cfg)

    # ----------------- Clipboard -----------------
    def _write_clipboard(self, text: str):
        clipboard: QClipboard = QApplication.clipboard()
        if clipboard is None:
            raise RuntimeError("no clipboard available")
        clipboard.setText(text, mode=QClipboard.Clipboard)

    def on_copy_example(self):
        ok, message = copy_sample(self._write_clipboard, self.example)
        if ok:
            QMessageBox.information(self, "Copied", message)
        else:
            QMessageBox.warning(self, "Clipboard", message)

    # ----------------- Evaluator -----------------
    def on_password_changed(self, ui, text: str):
        result = evaluate(text)
        _, colour = fill_style(result.label)

        ui["meter"].setValue(result.score)
        ui["meter"].setStyleSheet(f"QProgressBar::chunk {{ background-color: {colour}; }}")
        ui["lbl_label"].setText(result.label)
        ui["lbl_score"].setText(format_score(result))
        ui["lbl_entropy"].setText(format_entropy(result))
        ui["lst_feedback"].clear()
        ui["lst_feedback"].addItems(feedback_lines(result))


def main():
    app = QApplication(sys.argv)
    gui = PassMeterGUI()
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
