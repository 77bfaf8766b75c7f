def test_home_reports_school_config(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.get_json() == {
        "escuela": "Escuela Superior Vocacional",
        "anioAcademico": "2025-2026",
        "estado": "ok",
    }


def test_unknown_route_returns_json_404(client):
    response = client.get('/no-existe')
    assert response.status_code == 404
    assert response.get_json() == {"error": "Recurso no encontrado."}
