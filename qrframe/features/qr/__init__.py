"""QR feature module for QR Frame."""

from qrframe.features.qr.service import (
    build_qr_image_url,
    encode_uri_component,
    qr_data_from_url,
    render_terminal_qr,
)

__all__ = [
    "build_qr_image_url",
    "encode_uri_component",
    "qr_data_from_url",
    "render_terminal_qr",
]
