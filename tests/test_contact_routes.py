import pytest


def contact_form(**overrides):
    form = {
        "name": "Vikram",
        "email": "Vikram@X.com",
        "phone": "9822000000",
        "address": "12 MG Road, Pune",
        "contactPreference": "Call me",
        "requirementType": "Supervision and Management",
        "detailsChecked": True,
    }
    form.update(overrides)
    return form


@pytest.mark.anyio
async def test_contact_form_is_saved(client, contacts):
    resp = await client.post("/home/contactus", json=contact_form())

    assert resp.status_code == 201
    entry = contacts.entries["vikram@x.com"]
    assert entry["contact_preference"] == "Call me"
    assert entry["details_checked"] is True


@pytest.mark.anyio
async def test_unknown_requirement_type_is_400(client, contacts):
    resp = await client.post("/home/contactus", json=contact_form(requirementType="Demolition"))

    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation Error"
    assert contacts.entries == {}


@pytest.mark.anyio
async def test_second_message_from_same_email_is_409(client):
    await client.post("/home/contactus", json=contact_form())

    resp = await client.post("/home/contactus", json=contact_form(name="Someone else"))

    assert resp.status_code == 409
