"""HTTP middleware: request ID and base URL.

Applied in main app; order matters (last added = outermost).
"""

from family_circles.middleware.base_url import BaseUrlMiddleware
from family_circles.middleware.request_id import RequestIDMiddleware

__all__ = [
    "BaseUrlMiddleware",
    "RequestIDMiddleware",
]
