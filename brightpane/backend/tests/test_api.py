def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_price_bundle_quote(client):
    r = client.post(
        "/quotes/price",
        json={
            "property_type": "Semi-Detached",
            "bedroom_band": "2-3",
            "frequency": "4-weekly",
            "gutter_clearing": True,
            "fascia_soffit_gutter": True,
        },
    )
    assert r.status_code == 200
    body = r.json()
    assert body["subtotal_before_discount"] == 200
    assert body["discount"] == 20
    assert body["grand_total"] == 180
    assert body["quote_only"] is False
    assert [li["code"] for li in body["line_items"]] == [
        "window",
        "gutter_clearing",
        "fascia_soffit_gutter",
        "bundle_discount",
    ]


def test_price_commercial_is_quote_only(client):
    r = client.post("/quotes/price", json={"kind": "commercial", "gutter_clearing": True})
    assert r.status_code == 200
    body = r.json()
    assert body["quote_only"] is True
    assert body["grand_total"] == 0


def test_price_rejects_unknown_inputs(client):
    assert client.post("/quotes/price", json={"property_type": "Detached"}).status_code == 422
    assert (
        client.post(
            "/quotes/price",
            json={"property_type": "Detached", "bedroom_band": "4", "frequency": "weekly"},
        ).status_code
        == 422
    )
    assert (
        client.post("/quotes/price", json={"property_type": "Terraced", "bedroom_band": "4"}).status_code
        == 422
    )


def test_options_lists_frequency_prices(client):
    r = client.get("/quotes/options")
    assert r.status_code == 200
    body = r.json()

    assert len(body["tiers"]) == 8
    semi = next(t for t in body["tiers"] if t["property_type"] == "Semi-Detached" and t["bedroom_band"] == "2-3")
    assert semi["frequency_prices"] == {"4-weekly": 20, "8-weekly": 23, "12-weekly": 25, "adhoc": 40}
    assert semi["gutter_clearing_price"] == 80
    assert semi["fascia_soffit_gutter_price"] == 100
    assert [t["kind"] for t in body["tiers"] if t["quote_only"]] == ["custom_quote", "commercial"]
    assert body["surcharges"] == {"conservatory": 5, "extension": 5}


def test_email_params_endpoint(client):
    r = client.post(
        "/quotes/email-params",
        json={
            "selection": {"property_type": "Detached", "bedroom_band": "4", "frequency": "adhoc", "has_conservatory": True},
            "selected_date": "ASAP",
        },
    )
    assert r.status_code == 200
    body = r.json()
    assert body["breakdown"]["grand_total"] == 55
    assert body["params"]["total_price"] == "£55.00"
    assert body["params"]["frequency"] == "One-off"
    assert body["params"]["scheduled_date"] == "ASAP"


def test_availability_meare(client):
    r = client.get(
        "/availability",
        params={"postcode": "ba6 9aa", "address_line1": "4 Meare Green", "today": "2026-10-17"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["postcode"] == "BA6 9AA"
    assert body["dates"] == [{"date": "2026-10-22", "display": "Thu, 22 Oct"}]
    assert body["error_kind"] is None
    assert body["asap_available"] is True


def test_availability_need_more_input(client):
    r = client.get("/availability", params={"postcode": "BS4", "today": "2026-10-17"})
    body = r.json()
    assert body["error_kind"] == "NEED_MORE_INPUT"
    assert body["dates"] == []
    assert body["message"]
    assert body["asap_available"] is True


def test_availability_not_covered(client):
    body = client.get("/availability", params={"postcode": "EX1 1AA", "today": "2026-10-17"}).json()
    assert body["error_kind"] == "NOT_COVERED"


def test_debug_config_needs_key(client, api_key):
    assert client.get("/debug/config").status_code == 401
    r = client.get("/debug/config", headers={"X-API-Key": api_key})
    assert r.status_code == 200
    assert r.json()["BOOKING_HORIZON_DAYS"] == 42


def test_only_config_is_exposed_under_debug(client, api_key):
    assert client.get("/debug/routes", headers={"X-API-Key": api_key}).status_code == 404
