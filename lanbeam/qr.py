"""Render a URL as a QR code made of terminal characters."""

import qrcode
from qrcode.constants import ERROR_CORRECT_M

from lanbeam.config import (
    QR_BORDER,
    QR_DARK,
    QR_LIGHT,
    QR_LINE_STYLE,
    QR_MODULE_HEIGHT,
    QR_MODULE_WIDTH,
)
from lanbeam.prompt import Echo


def render_qr(data: str) -> str:
    """
    Encode `data` and draw it as lines of text.

    Each module is QR_MODULE_WIDTH characters wide and QR_MODULE_HEIGHT
    lines high, so a square code looks square in a terminal. The quiet
    zone is included.
    """
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, border=QR_BORDER)
    qr.add_data(data)
    qr.make(fit=True)

    lines = []
    for row in qr.get_matrix():
        line = "".join((QR_DARK if dark else QR_LIGHT) * QR_MODULE_WIDTH for dark in row)
        lines.extend([line] * QR_MODULE_HEIGHT)
    return "\n".join(lines)


def print_qr(data: str, echo: Echo = print) -> None:
    for line in render_qr(data).split("\n"):
        echo(QR_LINE_STYLE.format(line))
