# =============================================================================
# tests/test_make_admin.py - Admin bootstrap script
# =============================================================================

from crudhub.domain.enums import AccountStatus
from crudhub.infrastructure.orm.account_model import AdminModel

import make_admin

from tests.conftest import API


def test_creates_admin_that_can_login(client, db_session):
    admin = make_admin.create_admin(db_session, "Root@Example.com", "super-secret-pw")

    assert admin.email == "root@example.com"
    response = client.post(f"{API}/auth/admin/login", json={"email": "root@example.com", "password": "super-secret-pw"})
    assert response.status_code == 200


def test_reactivates_existing_admin(db_session):
    admin = make_admin.create_admin(db_session, "ops@example.com", "first-password")
    admin.status = AccountStatus.SUSPENDED.value
    db_session.commit()

    again = make_admin.create_admin(db_session, "ops@example.com", "second-password")

    assert again.id == admin.id
    assert again.status == AccountStatus.ACTIVE.value
    assert db_session.query(AdminModel).count() == 1


def test_main_reports_success(capsys):
    assert make_admin.main(["cli@example.com", "cli-password", "--name", "CLI Admin"]) == 0
    assert "cli@example.com" in capsys.readouterr().out
