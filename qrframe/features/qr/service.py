"""QR image references for QR Frame.

The core only builds a URL pointing at the external QR image service; the
image itself is never fetched. ``render_terminal_qr`` draws a QR locally
for the terminal preview.
"""

from __future__ import annotations

from urllib.parse import parse_qs, quote, urlsplit

import qrcode

from qrframe.shared.config import DEFAULT_QR_SERVICE_URL, DEFAULT_QR_SIZE

# Characters JavaScript's encodeURIComponent leaves untouched besides A-Z a-z 0-9.
URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=URI_COMPONENT_SAFE)


def build_qr_image_url(
    address: str,
    size: int = DEFAULT_QR_SIZE,
    base_url: str = DEFAULT_QR_SERVICE_URL,
) -> str:
    return f"{base_url}?size={size}x{size}&data={encode_uri_component(address)}"


def qr_data_from_url(image_url: str) -> str | None:
    values = parse_qs(urlsplit(image_url).query).get("data")
    if not values:
        return None
    return values[0]


def render_terminal_qr(data: str) -> str:
    qr = qrcode.QRCode(version=1, box_size=1, border=1)
    qr.add_data(data)
    qr.make(fit=True)

    qr_str = ""
    for row in qr.modules:
        qr_str += "".join(["██" if cell else "  " for cell in row]) + "\n"
    return qr_str
