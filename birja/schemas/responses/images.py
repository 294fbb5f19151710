from pydantic import Field

from birja.schemas import CamelModel


class DirectUploadResponse(CamelModel):
    upload_url: str = Field(..., alias="uploadURL")


class ImageInfoResponse(CamelModel):
    image_id: str
    image_url: str
    status: str = "Use this URL to access the image"


class ImageDebugResponse(CamelModel):
    image_id: str
    account_hash: str
    variant: str
    image_url: str
    note: str = "Make sure the public variant is configured in Cloudflare Images dashboard"
