"""Admin catalog routes: pharmacy products and doctors."""

from fastapi import APIRouter, Depends

from healthplus.api.dependencies import get_context, require_admin
from healthplus.api.presenters import present_result
from healthplus.api.schemas.portal import (
    DoctorCreateBody,
    DoctorUpdateBody,
    ProductCreateBody,
    ProductUpdateBody,
)
from healthplus.application import PortalContext
from healthplus.application.use_cases import (
    AddDoctorUseCase,
    AddProductUseCase,
    DoctorInput,
    ProductInput,
    UpdateDoctorUseCase,
    UpdateProductUseCase,
)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.post("/products")
async def add_product(body: ProductCreateBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await AddProductUseCase(context).execute(ProductInput(**body.model_dump())))


@router.patch("/products/{product_id}")
async def update_product(
    product_id: str,
    body: ProductUpdateBody,
    context: PortalContext = Depends(get_context),  # noqa: B008
):
    updates = body.model_dump(exclude_none=True)
    return present_result(await UpdateProductUseCase(context).execute(product_id, updates))


@router.post("/doctors")
async def add_doctor(body: DoctorCreateBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await AddDoctorUseCase(context).execute(DoctorInput(**body.model_dump())))


@router.patch("/doctors/{doctor_id}")
async def update_doctor(
    doctor_id: str,
    body: DoctorUpdateBody,
    context: PortalContext = Depends(get_context),  # noqa: B008
):
    """Edit a doctor; send ``{"available": false}`` to take them off the booking list."""
    updates = body.model_dump(exclude_none=True)
    return present_result(await UpdateDoctorUseCase(context).execute(doctor_id, updates))
