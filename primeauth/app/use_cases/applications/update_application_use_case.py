"""
Update Application Use Case

Partial update of application settings and tenant messages.
"""

from datetime import datetime
from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import ApplicationInfo, UpdateApplicationCommand


class UpdateApplicationUseCase:
    """
    Business Rules:
    - Only fields present in the command change
    - Message fields cannot be blanked
    - Changes apply to the next request (no caching)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: UUID, application_id: UUID, command: UpdateApplicationCommand
    ) -> Result[ApplicationInfo]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            _, application = access.value
            changes = command.model_dump(exclude_unset=True, exclude_none=True)

            for field, value in changes.items():
                if field.endswith("_message") and not value.strip():
                    return Return.err(Error("INVALID_MESSAGE", f"{field} cannot be empty"))

            for field, value in changes.items():
                setattr(application, field, value)
            application.updated_at = datetime.utcnow()

            application = await self.uow.applications.update(application)
            await self.uow.commit()

            info = ApplicationInfo.model_validate(application)

            await ActivityRecorder(self.uow).record(
                event="application_updated",
                success=True,
                application_id=application_id,
                metadata={"account_id": str(account_id), "fields": sorted(changes)},
            )

            return Return.ok(info)
