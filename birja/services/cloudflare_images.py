import logging
from typing import Optional

import httpx

from birja.core.exceptions import ServerErrorException
from birja.core.settings import settings

logger = logging.getLogger(__name__)


class CloudflareImagesService:
    """Hands out one-time direct-upload URLs from Cloudflare Images.

    Image bytes never pass through this backend: the client posts the file
    to the returned ``uploadURL`` and embeds the resulting delivery URL in
    later vacancy/application payloads.
    """

    API_URL = "https://api.cloudflare.com/client/v4/accounts/{account_id}/images/v2/direct_upload"
    DELIVERY_URL = "https://imagedelivery.net/{account_hash}/{image_id}/{variant}"

    def __init__(
        self,
        account_id: Optional[str],
        api_token: Optional[str],
        account_hash: Optional[str] = None,
        variant: str = "public",
        timeout: float = 30.0,
    ):
        self.account_id = account_id
        self.api_token = api_token
        self.account_hash = account_hash
        self.variant = variant
        self.timeout = timeout

    async def create_direct_upload(self) -> str:
        if not self.account_id or not self.api_token:
            raise ServerErrorException("Cloudflare Images not configured")

        url = self.API_URL.format(account_id=self.account_id)
        headers = {'Authorization': f'Bearer {self.api_token}'}
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.post(url, headers=headers)
            data = response.json()
        except httpx.RequestError as req_err:
            logger.error("Cloudflare request error: %s", req_err)
            raise ServerErrorException("Server error") from req_err
        except ValueError as err:
            logger.error("Cloudflare returned a non-JSON body (status %s)", response.status_code)
            raise ServerErrorException("Cloudflare error") from err

        if not data.get("success"):
            logger.error("Cloudflare error: %s", data.get("errors"))
            raise ServerErrorException("Cloudflare error")
        return data["result"]["uploadURL"]

    def image_url(self, image_id: str) -> str:
        if not self.account_hash:
            raise ServerErrorException("CF_IMAGES_ACCOUNT_HASH not configured")
        return self.DELIVERY_URL.format(
            account_hash=self.account_hash,
            image_id=image_id,
            variant=self.variant,
        )


def get_cloudflare_images_service() -> CloudflareImagesService:
    return CloudflareImagesService(
        account_id=settings.CF_ACCOUNT_ID,
        api_token=settings.CF_IMAGES_TOKEN,
        account_hash=settings.CF_IMAGES_ACCOUNT_HASH,
        variant=settings.CF_IMAGES_VARIANT,
    )
