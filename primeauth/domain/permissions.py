"""
Owner console permission checks.

Owners hold every permission; everyone else needs the permission listed
explicitly. Inactive accounts hold nothing.
"""

from primeauth.domain.entities import Account, AccountRole, Permission

ROLE_HIERARCHY = [
    AccountRole.user,
    AccountRole.moderator,
    AccountRole.admin,
    AccountRole.owner,
]


def has_permission(account: Account, permission: Permission) -> bool:
    if not account.is_active:
        return False
    if account.role == AccountRole.owner:
        return True
    return permission.value in (account.permissions or [])


def has_role(account: Account, role: AccountRole) -> bool:
    """True when the account's role is ``role`` or higher"""
    if not account.is_active:
        return False
    return ROLE_HIERARCHY.index(AccountRole(account.role)) >= ROLE_HIERARCHY.index(role)


def can_manage_application(account: Account, application) -> bool:
    if application is None:
        return False
    if application.account_id == account.id:
        return account.is_active
    return has_permission(account, Permission.view_all_data)
