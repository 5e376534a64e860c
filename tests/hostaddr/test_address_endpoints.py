def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["components"]["ipv6_output"] == "compressed"


def test_parse_ipv4_query(client):
    response = client.get("/api/v1/addresses/parse", params={"value": "1.2.3.4:5"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["family"] == "ipv4"
    assert payload["groups"] == [1, 2, 3, 4]
    assert payload["port"] == 5
    assert payload["address_and_port"] == "1.2.3.4:5"


def test_parse_ipv6_query_padded(client):
    response = client.get("/api/v1/addresses/parse", params={"value": "[::1]:80", "padded": "true"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["family"] == "ipv6"
    assert payload["padded"] is True
    assert payload["address"] == "0000:0000:0000:0000:0000:0000:0000:0001"
    assert payload["address_and_port"] == "[0000:0000:0000:0000:0000:0000:0000:0001]:80"


def test_parse_query_invalid(client):
    response = client.get("/api/v1/addresses/parse", params={"value": "1::2::3"})
    assert response.status_code == 400
    assert response.json()["error_code"] == "VALUE_ERROR"


def test_parse_body_with_groups(client):
    response = client.post("/api/v1/addresses/parse", json={"groups": [0x2001, 0xDB8, 0, 0, 0, 0, 0, 1], "port": 8443})
    assert response.status_code == 200
    payload = response.json()
    assert payload["family"] == "ipv6"
    assert payload["address_and_port"] == "[2001:db8::1]:8443"


def test_parse_body_with_bad_groups(client):
    response = client.post("/api/v1/addresses/parse", json={"groups": [1, 2, 3]})
    assert response.status_code == 400


def test_parse_body_with_value(client):
    response = client.post("/api/v1/addresses/parse", json={"value": "10.0.0.1"})
    assert response.status_code == 200
    assert response.json()["address"] == "10.0.0.1"


def test_parse_body_needs_exactly_one_source(client):
    assert client.post("/api/v1/addresses/parse", json={}).status_code == 422
    both = {"value": "10.0.0.1", "groups": [10, 0, 0, 1]}
    assert client.post("/api/v1/addresses/parse", json=both).status_code == 422


def test_batch(client):
    values = ["1.2.3.4", "[1:2:3:4:5:6:7:8]:9", "bogus", "::"]
    response = client.post("/api/v1/addresses/batch", json={"values": values})
    assert response.status_code == 200
    payload = response.json()
    assert payload["count"] == 4
    assert payload["valid_count"] == 3
    results = {item["value"]: item for item in payload["items"]}
    assert results["bogus"]["valid"] is False
    assert results["bogus"]["result"] is None
    assert results["::"]["result"]["address"] == "::"
    assert results["[1:2:3:4:5:6:7:8]:9"]["result"]["port"] == 9
