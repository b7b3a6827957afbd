"""
Sign In Account Use Case

Called by the external sign-in flow once it has authenticated an owner.
Provisions the account on first sign-in and issues a console session token.
"""

import logging

from libs.result import Error, Result, Return
from primeauth.api.utils.jwt import generate_console_token
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import Account

from .dtos import AccountInfo, SignInResponse

logger = logging.getLogger(__name__)


class SignInAccountUseCase:
    """
    Business Rules:
    - Emails are matched case-insensitively (stored lower-cased)
    - Unknown emails get a new account with role=user
    - Deactivated accounts cannot sign in
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> Result[SignInResponse]:
        email = email.strip().lower()

        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)
            created = False

            if account is None:
                account = await self.uow.accounts.create(Account(email=email))
                await self.uow.commit()
                created = True
                logger.info("Provisioned account %s", account.id)
            elif not account.is_active:
                return Return.err(Error("ACCOUNT_DISABLED", "Account has been deactivated"))

            info = AccountInfo.model_validate(account)
            token = generate_console_token(info.id, info.role.value)

            if created:
                await ActivityRecorder(self.uow).record(
                    event="account_created",
                    success=True,
                    metadata={"account_id": str(info.id)},
                )

            return Return.ok(SignInResponse(account=info, access_token=token, created=created))
