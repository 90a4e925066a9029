"""pvoutput.org uploader."""

from src.uploader.client import PvOutputClient, PvOutputSettings, UploadError, send_to_pvoutput
from src.uploader.fields import build_output_fields, build_status_fields

__all__ = [
    "PvOutputClient",
    "PvOutputSettings",
    "UploadError",
    "build_output_fields",
    "build_status_fields",
    "send_to_pvoutput",
]
