"""Standard library ``json`` support for buffers.

``json.dumps`` cannot serialize arbitrary objects, so this module provides an
encoder class that writes each ``Buffer`` as its base64 text, using the
buffer's own encoder or its registry default.

Example:
    >>> import json
    >>> json.dumps({"bar": Buffer(b"Alice")}, cls=BufferJSONEncoder)
    '{"bar": "QWxpY2U"}'
"""

from __future__ import annotations

import json
from typing import Any

from byteslice.buffer import Buffer


class BufferJSONEncoder(json.JSONEncoder):
    """JSON encoder that serializes ``Buffer`` values as base64 strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Buffer):
            return o.encode_string()
        return super().default(o)
