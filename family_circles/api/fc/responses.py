"""Response class for /fc endpoints: JSON, readable from any origin."""

from fastapi.responses import JSONResponse

FC_RESPONSE_HEADERS = {"Access-Control-Allow-Origin": "*"}


class FamilyCirclesJSONResponse(JSONResponse):
    """JSONResponse (Content-Type: application/json) with Access-Control-Allow-Origin: *."""

    def __init__(self, content=None, status_code: int = 200, headers=None, **kwargs) -> None:
        merged = {**FC_RESPONSE_HEADERS, **(headers or {})}
        super().__init__(content=content, status_code=status_code, headers=merged, **kwargs)
