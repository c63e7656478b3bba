"""Authentication routes: mock login, OTP registration, logout and profile."""

from fastapi import APIRouter, Depends

from healthplus.api.dependencies import get_context
from healthplus.api.presenters import present_result
from healthplus.api.schemas.portal import LoginBody, ProfileUpdateBody, RegisterBody, VerifyOtpBody
from healthplus.application import PortalContext
from healthplus.application.use_cases import (
    LoginRequest,
    LoginUseCase,
    LogoutUseCase,
    RegisterRequest,
    RegisterUseCase,
    UpdateProfileUseCase,
    VerifyOtpUseCase,
)

router = APIRouter()


@router.post("/login")
async def login(body: LoginBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    result = await LoginUseCase(context).execute(LoginRequest(**body.model_dump()))
    return present_result(result)


@router.post("/register")
async def register(body: RegisterBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    """
    Start a registration. The one-time code is delivered as an "OTP Sent"
    notification, so it is not echoed in the response.
    """
    result = await RegisterUseCase(context).execute(RegisterRequest(**body.model_dump()))
    return {**present_result(result), "data": None}


@router.post("/verify-otp")
async def verify_otp(body: VerifyOtpBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    result = await VerifyOtpUseCase(context).execute(body.otp)
    return present_result(result)


@router.post("/logout")
async def logout(context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await LogoutUseCase(context).execute())


@router.patch("/profile")
async def update_profile(body: ProfileUpdateBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    updates = body.model_dump(exclude_none=True)
    return present_result(await UpdateProfileUseCase(context).execute(updates))
