"""
Authentication API routes.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from notaire.application.use_cases.authenticate_wallet import AuthenticateWallet
from notaire.application.use_cases.generate_auth_message import (
    GenerateAuthMessage,
)
from notaire.application.use_cases.get_wallet_profile import GetWalletProfile
from notaire.application.use_cases.update_wallet_profile import (
    UpdateWalletProfile,
    UpdateWalletProfileCommand,
)
from notaire.di.dependencies import (
    get_authenticate_wallet,
    get_generate_auth_message,
    get_get_wallet_profile,
    get_update_wallet_profile,
)
from notaire.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidSignatureError,
    ValidationError,
)
from notaire.presentation.api.middleware.auth import get_current_wallet
from notaire.presentation.schemas.auth_schemas import (
    AuthenticateRequest,
    AuthenticateResponse,
    AuthMessageRequest,
    AuthMessageResponse,
    UpdateProfileRequest,
    WalletProfileResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# ================================================================
# Challenge Endpoint
# ================================================================


@router.post(
    "/message",
    response_model=AuthMessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Get sign-in message",
)
async def get_auth_message(
    request: AuthMessageRequest,
    use_case: GenerateAuthMessage = Depends(get_generate_auth_message),
) -> AuthMessageResponse:
    """Return the challenge text the wallet should sign."""
    try:
        message = use_case.execute(request.wallet_address)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    return AuthMessageResponse(message=message)


# ================================================================
# Authenticate Endpoint
# ================================================================


@router.post(
    "/authenticate",
    response_model=AuthenticateResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate with wallet signature",
)
async def authenticate(
    request: AuthenticateRequest,
    use_case: AuthenticateWallet = Depends(get_authenticate_wallet),
) -> AuthenticateResponse:
    """
    Authenticate a wallet.

    Flow:
    1. Verify signature (raw message, then signed-message envelope)
    2. Load or create wallet profile
    3. Issue JWT session
    """
    try:
        result = await use_case.execute(
            wallet_address=request.wallet_address,
            message=request.message,
            signature=request.signature,
        )
    except InvalidSignatureError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )

    return AuthenticateResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        profile=WalletProfileResponse.model_validate(result.profile),
    )


# ================================================================
# Current Profile Endpoint
# ================================================================


@router.get(
    "/me",
    response_model=WalletProfileResponse,
    summary="Get current wallet profile",
)
async def get_me(
    wallet_address: str = Depends(get_current_wallet),
    use_case: GetWalletProfile = Depends(get_get_wallet_profile),
) -> WalletProfileResponse:
    """Return the profile of the authenticated wallet."""
    try:
        profile = await use_case.execute(wallet_address)
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    return WalletProfileResponse.model_validate(profile)


@router.patch(
    "/profile",
    response_model=WalletProfileResponse,
    summary="Update current wallet profile",
)
async def update_profile(
    request: UpdateProfileRequest,
    wallet_address: str = Depends(get_current_wallet),
    use_case: UpdateWalletProfile = Depends(get_update_wallet_profile),
) -> WalletProfileResponse:
    """
    Edit username and full name of the authenticated wallet.

    Usernames are unique; a name held by another wallet is rejected.
    """
    # Explicit null clears a field, same as an empty string
    fields = {
        name: value or ""
        for name, value in request.model_dump(exclude_unset=True).items()
    }
    command = UpdateWalletProfileCommand(wallet_address=wallet_address, **fields)

    try:
        profile = await use_case.execute(command)
    except (ValidationError, DuplicateEntityError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    return WalletProfileResponse.model_validate(profile)
