# tests/domains/test_prj_n.py

"""
'prj' 도메인 (프로젝트 및 체크리스트) 관련 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 프로젝트 관리 엔드포인트 테스트:
    - `POST /projects` (생성)
    - `GET /projects` (목록 조회)
    - `GET /projects/{id}` (단일 조회, 체크리스트 포함)
    - `PUT /projects/{id}` (수정)
    - `DELETE /projects/{id}` (삭제, 체크리스트 연쇄 삭제)
- 체크리스트 관리 엔드포인트 테스트:
    - `POST /projects/{id}/checklists` (생성, 공급업체 자동 등록)
    - `GET /projects/{id}/checklists` (프로젝트별 목록 조회)
    - `GET /checklists/{id}` (단일 조회)
    - `PUT /checklists/{id}` (수정)
    - `DELETE /checklists/{id}` (삭제)

감사 필드(createdAt/createdBy/lastUpdatedAt/lastUpdatedBy) 기록과
(프로젝트, 공급업체 코드, 문서명) 유일성 규칙을 함께 검증합니다.
"""

import asyncio
import uuid
from datetime import datetime, UTC

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.domains.prj import models as prj_models
from checklist_api.domains.ven import models as ven_models

API = "/api/v1"


def _parse(value: str) -> datetime:
    """응답의 ISO 일시를 naive UTC 로 변환합니다 (SQLite 는 시간대 정보를 저장하지 않습니다)."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def _utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


async def _create_project(client: AsyncClient, name: str = "Bridge A", region: str = "Seoul") -> dict:
    response = await client.post(f"{API}/projects", json={"name": name, "region": region})
    assert response.status_code == 201, response.text
    return response.json()


async def _create_checklist(
    client: AsyncClient,
    project_id: str,
    supplier_code: str = "SUP001",
    document_name: str = "Contract Data",
    is_checked: bool = True,
    **extra,
) -> dict:
    payload = {"supplierCode": supplier_code, "documentName": document_name, "isChecked": is_checked, **extra}
    response = await client.post(f"{API}/projects/{project_id}/checklists", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


# --- 프로젝트 관리 엔드포인트 테스트 ---

@pytest.mark.asyncio
async def test_create_project_success(client: AsyncClient):
    """
    새 프로젝트 생성 시 서버가 ID 와 감사 필드를 채우는지 테스트합니다. (토큰 없음 -> "system")
    """
    print("\n--- Running test_create_project_success ---")
    before = _utcnow()
    created = await _create_project(client)
    print(f"Response JSON: {created}")

    assert uuid.UUID(created["id"])
    assert created["name"] == "Bridge A"
    assert created["region"] == "Seoul"
    assert created["createdBy"] == "system"
    assert before.replace(microsecond=0) <= _parse(created["createdAt"]) <= _utcnow()
    assert created["lastUpdatedAt"] is None
    assert created["lastUpdatedBy"] is None


@pytest.mark.asyncio
async def test_create_project_records_token_actor(alice_client: AsyncClient):
    """
    Bearer 토큰의 'sub' 가 createdBy 로 기록되는지 테스트합니다.
    """
    created = await _create_project(alice_client)
    assert created["createdBy"] == "alice"


@pytest.mark.asyncio
async def test_create_project_ignores_client_audit_fields(client: AsyncClient):
    """
    요청 본문에 감사 필드나 ID 를 보내도 무시되는지 테스트합니다.
    """
    forged_id = str(uuid.uuid4())
    response = await client.post(
        f"{API}/projects",
        json={"id": forged_id, "name": "P", "region": "R", "createdBy": "mallory", "createdAt": "2000-01-01T00:00:00Z"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] != forged_id
    assert body["createdBy"] == "system"
    assert _parse(body["createdAt"]).year != 2000


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "region": "Seoul"},
        {"name": "   ", "region": "Seoul"},
        {"name": "N" * 201, "region": "Seoul"},
        {"name": "Bridge", "region": "R" * 101},
        {"name": "Bridge"},
    ],
)
async def test_create_project_validation_error(client: AsyncClient, payload: dict):
    """
    필수 필드 누락, 빈 문자열, 최대 길이 초과 시 400 을 반환하는지 테스트합니다.
    """
    response = await client.post(f"{API}/projects", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_read_projects_list(client: AsyncClient):
    """
    프로젝트 목록 조회가 생성된 프로젝트를 모두 반환하는지 테스트합니다.
    """
    await _create_project(client, name="First")
    await _create_project(client, name="Second")

    response = await client.get(f"{API}/projects")

    assert response.status_code == 200
    names = [p["name"] for p in response.json()]
    assert sorted(names) == ["First", "Second"]

    response = await client.get(f"{API}/projects", params={"limit": 1})
    assert len(response.json()) == 1


@pytest.mark.asyncio
async def test_read_project_not_found(client: AsyncClient):
    """
    존재하지 않는 프로젝트 조회 시 404 를 반환하는지 테스트합니다.
    """
    response = await client.get(f"{API}/projects/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


@pytest.mark.asyncio
async def test_read_project_includes_only_its_checklists(client: AsyncClient):
    """
    프로젝트 조회 결과에 해당 프로젝트의 체크리스트만 포함되는지 테스트합니다.
    """
    project_a = await _create_project(client, name="A")
    project_b = await _create_project(client, name="B")
    c1 = await _create_checklist(client, project_a["id"], document_name="Doc 1")
    c2 = await _create_checklist(client, project_a["id"], document_name="Doc 2")
    await _create_checklist(client, project_b["id"], document_name="Doc 1")

    response = await client.get(f"{API}/projects/{project_a['id']}")

    assert response.status_code == 200
    body = response.json()
    assert [c["id"] for c in body["checklists"]] == [c1["id"], c2["id"]]
    assert all(c["projectId"] == project_a["id"] for c in body["checklists"])


@pytest.mark.asyncio
async def test_update_project_keeps_created_fields(client: AsyncClient, bob_client: AsyncClient):
    """
    프로젝트 수정 시 createdAt/createdBy 는 유지되고 lastUpdated* 만 기록되는지 테스트합니다.
    """
    created = await _create_project(client)

    response = await bob_client.put(f"{API}/projects/{created['id']}", json={"region": "Busan"})
    assert response.status_code == 204
    assert response.content == b""

    fetched = (await client.get(f"{API}/projects/{created['id']}")).json()
    assert fetched["region"] == "Busan"
    assert fetched["name"] == created["name"]
    assert fetched["createdAt"] == created["createdAt"]
    assert fetched["createdBy"] == "system"
    assert fetched["lastUpdatedBy"] == "bob"
    assert _parse(fetched["lastUpdatedAt"]) >= _parse(fetched["createdAt"])


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"name": None}, {"region": ""}])
async def test_update_project_validation_error(client: AsyncClient, payload: dict):
    """
    빈 수정 요청, null 지정, 빈 문자열 수정 시 400 을 반환하는지 테스트합니다.
    """
    created = await _create_project(client)

    response = await client.put(f"{API}/projects/{created['id']}", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_update_project_not_found(client: AsyncClient):
    response = await client.put(f"{API}/projects/{uuid.uuid4()}", json={"name": "X"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_project_cascades_to_checklists(client: AsyncClient, db_session: AsyncSession):
    """
    프로젝트 삭제 시 소속 체크리스트가 함께 삭제되고, 이후 조회는 404 인지 테스트합니다.
    """
    project = await _create_project(client)
    c1 = await _create_checklist(client, project["id"], document_name="Doc 1")
    c2 = await _create_checklist(client, project["id"], document_name="Doc 2")

    response = await client.delete(f"{API}/projects/{project['id']}")
    assert response.status_code == 204

    assert (await client.get(f"{API}/projects/{project['id']}")).status_code == 404
    assert (await client.get(f"{API}/projects/{project['id']}/checklists")).status_code == 404
    for checklist in (c1, c2):
        assert (await client.get(f"{API}/checklists/{checklist['id']}")).status_code == 404
        assert await db_session.get(prj_models.Checklist, checklist["id"]) is None

    # 공급업체는 삭제되지 않습니다.
    assert await db_session.get(ven_models.ServiceProvider, "SUP001") is not None


@pytest.mark.asyncio
async def test_delete_project_not_found(client: AsyncClient):
    response = await client.delete(f"{API}/projects/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


# --- 체크리스트 관리 엔드포인트 테스트 ---

@pytest.mark.asyncio
async def test_create_checklist_success(alice_client: AsyncClient):
    """
    체크리스트 생성 시 프로젝트 ID, 감사 필드가 채워지는지 테스트합니다.
    """
    project = await _create_project(alice_client)

    created = await _create_checklist(alice_client, project["id"])

    assert isinstance(created["id"], int)
    assert created["projectId"] == project["id"]
    assert created["supplierCode"] == "SUP001"
    assert created["documentName"] == "Contract Data"
    assert created["isChecked"] is True
    assert created["createdBy"] == "alice"
    assert created["lastUpdatedAt"] is None


@pytest.mark.asyncio
async def test_create_checklist_is_checked_defaults_to_false(client: AsyncClient):
    project = await _create_project(client)
    response = await client.post(
        f"{API}/projects/{project['id']}/checklists",
        json={"supplierCode": "SUP001", "documentName": "Drawing"},
    )

    assert response.status_code == 201
    assert response.json()["isChecked"] is False


@pytest.mark.asyncio
async def test_create_checklist_registers_service_provider(client: AsyncClient):
    """
    처음 참조되는 공급업체 코드는 자동 등록되고, 이미 등록된 공급업체의 이름은 바뀌지 않는지 테스트합니다.
    """
    project = await _create_project(client)
    await _create_checklist(client, project["id"], supplier_code="SUP777", supplier_name="Acme Steel")
    await _create_checklist(
        client, project["id"], supplier_code="SUP777", document_name="Invoice", supplier_name="Renamed"
    )
    await _create_checklist(client, project["id"], supplier_code="SUP888")

    acme = (await client.get(f"{API}/service-providers/SUP777")).json()
    assert acme["supplierName"] == "Acme Steel"
    assert acme["createdBy"] == "system"

    fallback = (await client.get(f"{API}/service-providers/SUP888")).json()
    assert fallback["supplierName"] == "SUP888"


@pytest.mark.asyncio
@pytest.mark.parametrize("round_no", range(3))
async def test_concurrent_first_reference_registers_provider_once(client: AsyncClient, round_no: int):
    """
    아직 등록되지 않은 같은 공급업체 코드로 서로 다른 문서를 동시에 생성해도
    두 요청 모두 201 을 반환하고, 공급업체는 한 번만 등록되는지 테스트합니다.
    """
    project = await _create_project(client)
    supplier_code = f"NEW{round_no}"
    url = f"{API}/projects/{project['id']}/checklists"

    first, second = await asyncio.gather(
        client.post(url, json={"supplierCode": supplier_code, "documentName": "Doc A"}),
        client.post(url, json={"supplierCode": supplier_code, "documentName": "Doc B"}),
    )

    assert (first.status_code, second.status_code) == (201, 201), (first.text, second.text)

    providers = (await client.get(f"{API}/service-providers")).json()
    assert [p["supplierCode"] for p in providers].count(supplier_code) == 1

    listed = (await client.get(url)).json()
    assert sorted(c["documentName"] for c in listed) == ["Doc A", "Doc B"]


@pytest.mark.asyncio
async def test_create_checklist_project_not_found(client: AsyncClient, db_session: AsyncSession):
    """
    존재하지 않는 프로젝트에 체크리스트 생성 시 404 를 반환하고, 공급업체도 등록되지 않는지 테스트합니다.
    """
    response = await client.post(
        f"{API}/projects/{uuid.uuid4()}/checklists",
        json={"supplierCode": "SUP404", "documentName": "Doc", "isChecked": False},
    )

    assert response.status_code == 404
    assert await db_session.get(ven_models.ServiceProvider, "SUP404") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"documentName": "Doc"},
        {"supplierCode": "SUP001"},
        {"supplierCode": "", "documentName": "Doc"},
        {"supplierCode": "S" * 51, "documentName": "Doc"},
        {"supplierCode": "SUP001", "documentName": "D" * 201},
        {"supplierCode": "SUP001", "documentName": "Doc", "isChecked": "maybe"},
    ],
)
async def test_create_checklist_validation_error(client: AsyncClient, payload: dict):
    project = await _create_project(client)

    response = await client.post(f"{API}/projects/{project['id']}/checklists", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
@pytest.mark.parametrize("second_is_checked", [True, False])
async def test_create_checklist_duplicate_conflict(client: AsyncClient, second_is_checked: bool):
    """
    같은 (프로젝트, 공급업체 코드, 문서명) 조합은 isChecked 값과 관계없이 409 를 반환하는지 테스트합니다.
    """
    project = await _create_project(client)
    await _create_checklist(client, project["id"], is_checked=True)

    response = await client.post(
        f"{API}/projects/{project['id']}/checklists",
        json={"supplierCode": "SUP001", "documentName": "Contract Data", "isChecked": second_is_checked},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"

    listed = (await client.get(f"{API}/projects/{project['id']}/checklists")).json()
    assert len(listed) == 1


@pytest.mark.asyncio
async def test_same_document_allowed_in_other_project_or_supplier(client: AsyncClient):
    """
    프로젝트나 공급업체 코드가 다르면 같은 문서명을 허용하는지 테스트합니다.
    """
    project_a = await _create_project(client, name="A")
    project_b = await _create_project(client, name="B")

    await _create_checklist(client, project_a["id"])
    await _create_checklist(client, project_b["id"])
    await _create_checklist(client, project_a["id"], supplier_code="SUP002")


@pytest.mark.asyncio
async def test_read_checklist(client: AsyncClient):
    project = await _create_project(client)
    created = await _create_checklist(client, project["id"])

    response = await client.get(f"{API}/checklists/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_read_checklist_not_found(client: AsyncClient):
    response = await client.get(f"{API}/checklists/99999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_checklist_toggle_scenario(client: AsyncClient, alice_client: AsyncClient):
    """
    프로젝트 생성 -> 체크리스트 추가 -> isChecked 수정 -> 조회 시나리오를 테스트합니다.
    """
    project = await _create_project(client)
    created = await _create_checklist(client, project["id"], is_checked=True)

    shown = (await client.get(f"{API}/projects/{project['id']}")).json()
    assert shown["checklists"][0]["documentName"] == "Contract Data"
    assert shown["checklists"][0]["isChecked"] is True

    response = await alice_client.put(f"{API}/checklists/{created['id']}", json={"isChecked": False})
    assert response.status_code == 204

    shown = (await client.get(f"{API}/projects/{project['id']}")).json()
    updated = shown["checklists"][0]
    assert updated["isChecked"] is False
    assert updated["documentName"] == "Contract Data"
    assert updated["createdAt"] == created["createdAt"]
    assert updated["createdBy"] == "system"
    assert updated["lastUpdatedBy"] == "alice"
    assert updated["lastUpdatedAt"] is not None


@pytest.mark.asyncio
async def test_update_checklist_rename_conflict(client: AsyncClient):
    """
    문서명을 같은 프로젝트/공급업체의 다른 체크리스트와 같게 수정하면 409 이고, 기존 값은 유지되는지 테스트합니다.
    """
    project = await _create_project(client)
    await _create_checklist(client, project["id"], document_name="Doc 1")
    second = await _create_checklist(client, project["id"], document_name="Doc 2")

    response = await client.put(f"{API}/checklists/{second['id']}", json={"documentName": "Doc 1"})

    assert response.status_code == 409
    fetched = (await client.get(f"{API}/checklists/{second['id']}")).json()
    assert fetched["documentName"] == "Doc 2"
    assert fetched["lastUpdatedAt"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"isChecked": None}, {"documentName": ""}])
async def test_update_checklist_validation_error(client: AsyncClient, payload: dict):
    project = await _create_project(client)
    created = await _create_checklist(client, project["id"])

    response = await client.put(f"{API}/checklists/{created['id']}", json=payload)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_checklist_not_found(client: AsyncClient):
    response = await client.put(f"{API}/checklists/99999", json={"isChecked": True})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_checklist(client: AsyncClient):
    """
    체크리스트 삭제 후 목록에서 사라지고, 다시 삭제하면 404 인지 테스트합니다.
    """
    project = await _create_project(client)
    created = await _create_checklist(client, project["id"])

    response = await client.delete(f"{API}/checklists/{created['id']}")
    assert response.status_code == 204

    listed = (await client.get(f"{API}/projects/{project['id']}/checklists")).json()
    assert listed == []
    assert (await client.get(f"{API}/projects/{project['id']}")).json()["checklists"] == []

    response = await client.delete(f"{API}/checklists/{created['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_deleted_checklist_combination_can_be_reused(client: AsyncClient):
    project = await _create_project(client)
    created = await _create_checklist(client, project["id"])
    await client.delete(f"{API}/checklists/{created['id']}")

    recreated = await _create_checklist(client, project["id"])
    assert recreated["id"] != created["id"]


@pytest.mark.asyncio
async def test_invalid_token_is_rejected(client_factory):
    """
    서명이 잘못된 토큰은 401 을 반환하는지 테스트합니다.
    """
    async with client_factory() as anon:
        anon.headers["Authorization"] = "Bearer not-a-valid-token"
        response = await anon.post(f"{API}/projects", json={"name": "P", "region": "R"})

    assert response.status_code == 401
