"""
Share Link DTOs
"""

from datetime import datetime

from pydantic import BaseModel

PUBLIC_TRIP_PATH = "/public/trips/"


class ShareLinkResponse(BaseModel):
    """
    Freshly issued share link.

    share_token is the raw secret. It is returned here once and cannot be
    recovered later, only regenerated.
    """

    share_token: str
    share_url: str
    created_at: datetime
    updated_at: datetime


class ShareLinkInfoResponse(BaseModel):
    """Existing share link without its secret"""

    trip_id: str
    created_at: datetime
    updated_at: datetime
