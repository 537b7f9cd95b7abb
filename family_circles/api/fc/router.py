"""FamilyCircles router aggregation.

All /fc routes answer with FamilyCirclesJSONResponse and use dependencies
from family_circles.api.fc.dependencies.
"""

from fastapi import APIRouter

from family_circles.api.fc.endpoints import config, records, search
from family_circles.api.fc.responses import FamilyCirclesJSONResponse

fc_router = APIRouter(default_response_class=FamilyCirclesJSONResponse)

fc_router.include_router(config.router, tags=["config"])
fc_router.include_router(records.router, tags=["records"])
fc_router.include_router(search.router, tags=["search"])
