from uuid import uuid4

from primeauth.domain.entities import Account, AccountRole, Application, Permission
from primeauth.domain.permissions import can_manage_application, has_permission, has_role


def test_owner_holds_every_permission():
    account = Account(email="o@example.com", role=AccountRole.owner)

    assert all(has_permission(account, permission) for permission in Permission)


def test_explicit_permission_required_below_owner():
    account = Account(email="a@example.com", role=AccountRole.admin, permissions=["manage_users"])

    assert has_permission(account, Permission.manage_users)
    assert not has_permission(account, Permission.view_all_data)


def test_inactive_account_holds_nothing():
    account = Account(email="o@example.com", role=AccountRole.owner, is_active=False)

    assert not has_permission(account, Permission.manage_users)
    assert not has_role(account, AccountRole.user)


def test_role_hierarchy():
    account = Account(email="m@example.com", role=AccountRole.moderator)

    assert has_role(account, AccountRole.user)
    assert has_role(account, AccountRole.moderator)
    assert not has_role(account, AccountRole.admin)


def test_can_manage_own_application_only():
    account = Account(email="u@example.com")
    own = Application(account_id=account.id, name="Mine")
    foreign = Application(account_id=uuid4(), name="Theirs")

    assert can_manage_application(account, own)
    assert not can_manage_application(account, foreign)
    assert not can_manage_application(account, None)


def test_view_all_data_reaches_foreign_applications():
    account = Account(email="s@example.com", permissions=["view_all_data"])
    foreign = Application(account_id=uuid4(), name="Theirs")

    assert can_manage_application(account, foreign)
