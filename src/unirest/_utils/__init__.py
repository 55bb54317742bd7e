from ._encoding import encode_values, multipart_files
from ._errors import handle_encoding_errors, handle_errors
from ._request_spec import (
    CloneMode,
    FileField,
    RequestSpec,
    canonical_header_key,
    copy_values,
)

__all__ = [
    "CloneMode",
    "FileField",
    "RequestSpec",
    "canonical_header_key",
    "copy_values",
    "encode_values",
    "handle_encoding_errors",
    "handle_errors",
    "multipart_files",
]
