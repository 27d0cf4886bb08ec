import bill_bot.config as config_mod
import bill_bot.services.billing as billing
from bill_bot.llm_fallback import GenericBillItem, GenericParseResult

SHOP_ORDER = "ரெண்டு சிவப்பு கம்பி 50 ரூபாய், மூணு செருப்பு 200 ரூ, ஒரு சரி 500 ரூபாய்"


def test_generic_bill_with_default_catalog(client):
    """Test that a shop order is itemized against the default catalog."""
    resp = client.post("/generic-bill/generate-bill", json={"voiceInput": SHOP_ORDER})
    assert resp.status_code == 200

    data = resp.json()
    assert data["success"] is True
    bill = data["bill"]
    assert bill["parse_source"] == "deterministic"
    assert bill["bill_total"] == 1200.0
    assert [(i["item_name"], i["quantity"], i["total_price"]) for i in bill["items"]] == [
        ("Red Wires", 2, 100.0),
        ("Shoes", 3, 600.0),
        ("Saree", 1, 500.0),
    ]


def test_generic_bill_with_caller_catalog(client):
    """Test that a caller-supplied catalog sets names and prices."""
    resp = client.post("/generic-bill/generate-bill", json={
        "voiceInput": "ரெண்டு டஜன் முட்டை ஒரு பால்",
        "catalog": [
            {"name": "Eggs", "unit_price": 6},
            {"name": "Aavin Milk", "unit_price": 30, "local_name": "பால்", "unit": "litre"},
        ],
    })
    assert resp.status_code == 200

    bill = resp.json()["bill"]
    assert [(i["item_name"], i["quantity"], i["total_price"]) for i in bill["items"]] == [
        ("Aavin Milk", 1, 30.0),
        ("Eggs", 24, 144.0),
    ]
    assert bill["bill_total"] == 174.0


def test_generic_bill_is_not_persisted(client):
    """Test that shop bills do not appear in the bill history."""
    client.post("/generic-bill/generate-bill", json={"voiceInput": SHOP_ORDER})
    assert client.get("/bill/bills").json()["count"] == 0


def test_generic_bill_rejects_empty_input(client):
    resp = client.post("/generic-bill/generate-bill", json={"voiceInput": "  "})
    assert resp.status_code == 400


def test_generic_bill_unrecognized_returns_422(client):
    resp = client.post("/generic-bill/generate-bill", json={"voiceInput": "something strange"})
    assert resp.status_code == 422


def test_generic_bill_rejects_bad_catalog(client):
    """Test that catalog entries need a name and a non-negative price."""
    resp = client.post("/generic-bill/generate-bill", json={
        "voiceInput": SHOP_ORDER,
        "catalog": [{"name": "Shoes", "unit_price": -1}],
    })
    assert resp.status_code == 422


def test_generic_bill_llm_fallback(client, monkeypatch):
    """Test that the generic LLM parser names items the catalog lacks."""
    monkeypatch.setattr(config_mod, "LLM_FALLBACK_ENABLED", True)
    result = GenericParseResult(items=[GenericBillItem("Soap", 2, 15.0, 30.0)])
    monkeypatch.setattr(billing, "parse_generic_order_with_llm", lambda voice_input: result)

    resp = client.post("/api/v1/generic-bill/generate-bill", json={"voiceInput": "rendu soap 30 rupees"})
    assert resp.status_code == 200

    bill = resp.json()["bill"]
    assert bill["parse_source"] == "llm"
    assert bill["items"] == [
        {"item_name": "Soap", "quantity": 2, "unit_price": 15.0, "total_price": 30.0},
    ]
    assert bill["bill_total"] == 30.0


def test_generic_bill_empty_catalog_is_not_defaulted(client):
    """Test that an empty catalog does not bill at the default shop prices."""
    resp = client.post("/generic-bill/generate-bill", json={"voiceInput": SHOP_ORDER, "catalog": []})
    assert resp.status_code == 422
