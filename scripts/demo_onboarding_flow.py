"""Demo: signup → login → forgot-password → org → invite, via TestClient.

Runs against the in-memory store (leave DATABASE_URL unset).

Run with:
    python scripts/demo_onboarding_flow.py
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from servicehub.main import app

EMAIL = "demo@example.com"
PASSWORD = "demo-pass"
NEW_PASSWORD = "demo-pass-2"


def main() -> None:
    client = TestClient(app)

    # ── Step 1: signup (twice; the second one reports the duplicate) ─
    r = client.post(
        "/users/signup",
        json={"full_name": "Demo User", "email": EMAIL, "password": PASSWORD},
    )
    user_id = r.json()["user_id"]
    print(f"1. POST /users/signup           → {r.status_code}  {r.json()}")
    r = client.post(
        "/users/signup",
        json={"full_name": "Demo User", "email": EMAIL, "password": PASSWORD},
    )
    print(f"   POST /users/signup (again)   → {r.status_code}  {r.json()}")

    # ── Step 2: login, wrong then right ─────────────────────────────
    r = client.post("/auth/login", json={"email": EMAIL, "password": "wrong"})
    print(f"2. POST /auth/login (bad)       → {r.status_code}  {r.json()}")
    r = client.post("/auth/login", json={"email": EMAIL, "password": PASSWORD})
    print(f"   POST /auth/login (good)      → {r.status_code}  {r.json()}")

    # ── Step 3: forgot-password, then the old password stops working ─
    r = client.post(
        "/auth/forgot-password",
        json={"email": EMAIL, "newPassword": NEW_PASSWORD},
    )
    print(f"3. POST /auth/forgot-password   → {r.status_code}  {r.json()}")
    r = client.post("/auth/login", json={"email": EMAIL, "password": PASSWORD})
    print(f"   POST /auth/login (old pw)    → {r.status_code}  {r.json()}")

    # ── Step 4: create an organization ──────────────────────────────
    r = client.post(
        "/organization/create",
        json={"name": "Demo Org", "org_type": "company", "user_id": user_id},
    )
    org_id = r.json()["org_id"]
    print(f"4. POST /organization/create    → {r.status_code}  {r.json()}")

    # ── Step 5: invite someone ──────────────────────────────────────
    r = client.post(
        "/invite",
        json={
            "org_id": org_id,
            "invited_by": user_id,
            "email": "friend@example.com",
            "role": "member",
        },
    )
    print(f"5. POST /invite                 → {r.status_code}  {r.json()}")


if __name__ == "__main__":
    main()
