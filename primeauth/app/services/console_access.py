"""
Owner console access checks shared by the console use cases.

Applications outside the caller's reach are reported as not found so their
existence is not leaked.
"""

from typing import Tuple
from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import Account, Application
from primeauth.domain.permissions import can_manage_application


def application_not_found() -> Error:
    return Error("APPLICATION_NOT_FOUND", "Application not found")


async def load_active_account(uow: UnitOfWork, account_id: UUID) -> Result[Account]:
    account = await uow.accounts.get_by_id(account_id)
    if account is None:
        return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))
    if not account.is_active:
        return Return.err(Error("ACCOUNT_DISABLED", "Account has been deactivated"))
    return Return.ok(account)


async def load_managed_application(
    uow: UnitOfWork, account_id: UUID, application_id: UUID
) -> Result[Tuple[Account, Application]]:
    """Caller's account plus an application it may manage"""
    account_result = await load_active_account(uow, account_id)
    if account_result.is_err():
        return account_result

    account = account_result.value
    application = await uow.applications.get_by_id(application_id)
    if not can_manage_application(account, application):
        return Return.err(application_not_found())

    return Return.ok((account, application))
