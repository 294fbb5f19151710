from fastapi import APIRouter, Depends
from birja.core.factory import Factory
from birja.core.middlewares.auth_middleware import require_employer
from birja.schemas.responses.images import DirectUploadResponse, ImageDebugResponse, ImageInfoResponse
from birja.services.cloudflare_images import CloudflareImagesService

images_router = APIRouter(prefix='/api/images', tags=["IMAGES"])


@images_router.post('/direct-upload')
async def direct_upload(
    current_user: dict = Depends(require_employer),
    images_service: CloudflareImagesService = Depends(Factory.get_images_service),
) -> DirectUploadResponse:
    upload_url = await images_service.create_direct_upload()
    return DirectUploadResponse(upload_url=upload_url)


@images_router.get('/debug/{image_id}')
async def image_debug(
    image_id: str,
    current_user: dict = Depends(require_employer),
    images_service: CloudflareImagesService = Depends(Factory.get_images_service),
) -> ImageDebugResponse:
    return ImageDebugResponse(
        image_id=image_id,
        account_hash=images_service.account_hash or "",
        variant=images_service.variant,
        image_url=images_service.image_url(image_id),
    )


@images_router.get('/info/{image_id}')
async def image_info(
    image_id: str,
    images_service: CloudflareImagesService = Depends(Factory.get_images_service),
) -> ImageInfoResponse:
    return ImageInfoResponse(image_id=image_id, image_url=images_service.image_url(image_id))
