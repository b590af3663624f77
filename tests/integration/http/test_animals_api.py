from __future__ import annotations


async def test_health(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "environment": "test"}


async def test_animals_crud_flow(client):
    payload = {"name": "Bella", "species": "Cat", "breed": "Siamese", "weight": 4.2}
    create_response = await client.post("/api/v1/animals/", json=payload)
    assert create_response.status_code == 201
    created = create_response.json()
    animal_id = created["id"]
    assert created["status"] == "Available"

    list_response = await client.get("/api/v1/animals/")
    assert list_response.status_code == 200
    assert list_response.json()["items"][0]["id"] == animal_id

    update_response = await client.put(
        f"/api/v1/animals/{animal_id}",
        json={**payload, "name": "Bella Prime", "status": "InTreatment"},
    )
    assert update_response.status_code == 200
    assert update_response.json()["name"] == "Bella Prime"
    assert update_response.json()["status"] == "InTreatment"

    adopted = await client.put(
        f"/api/v1/animals/{animal_id}", json={**payload, "status": "Adopted"}
    )
    assert adopted.status_code == 409

    delete_response = await client.delete(f"/api/v1/animals/{animal_id}")
    assert delete_response.status_code == 204
    assert (await client.get(f"/api/v1/animals/{animal_id}")).status_code == 404

    delete_again = await client.delete(f"/api/v1/animals/{animal_id}")
    assert delete_again.status_code == 409
    assert delete_again.json()["code"] == "already_deleted"


async def test_animal_list_caps_page_size(app, client):
    for i in range(12):
        response = await client.post(
            "/api/v1/animals/", json={"name": f"Pet {i}", "species": "Rabbit"}
        )
        assert response.status_code == 201

    default_page = (await client.get("/api/v1/animals/")).json()
    assert default_page["page_size"] == 5
    assert len(default_page["items"]) == 5

    capped = (await client.get("/api/v1/animals/", params={"page_size": 50})).json()
    assert capped["page_size"] == 10
    assert capped["total"] == 12

    dogs = (await client.get("/api/v1/animals/", params={"species": "Dog"})).json()
    assert dogs["total"] == 0


async def test_customer_and_employee_endpoints(client):
    customer = {
        "first_name": "Eva",
        "last_name": "Eriksen",
        "email": "eva@example.net",
        "phone": "99887766",
        "address": "Planetvej 5",
        "postal_code": "3456",
        "city": "Planetbyen",
    }
    created = await client.post("/api/v1/customers/", json=customer)
    assert created.status_code == 201
    duplicate = await client.post("/api/v1/customers/", json=customer)
    assert duplicate.status_code == 409

    bad_phone = await client.post(
        "/api/v1/customers/", json={**customer, "email": "x@y.dk", "phone": "12"}
    )
    assert bad_phone.status_code == 422
    assert bad_phone.json()["details"] == {"field": "phone"}

    employee = {
        "first_name": "Jens",
        "last_name": "Jensen",
        "email": "jens@shelter.example",
        "phone": "50607080",
        "position": "Shelter Worker",
        "hire_date": "2022-02-20T00:00:00Z",
    }
    created_employee = await client.post("/api/v1/employees/", json=employee)
    assert created_employee.status_code == 201
    employee_id = created_employee.json()["id"]
    fetched = await client.get(f"/api/v1/employees/{employee_id}")
    assert fetched.json()["position"] == "Shelter Worker"
    assert len((await client.get("/api/v1/customers/")).json()) == 1
