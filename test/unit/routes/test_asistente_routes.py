from servicios_escolares.conversation import replies


def test_first_greeting_then_pool(client):
    """
    GIVEN a fresh store
    WHEN the user greets the assistant twice
    THEN the first answer is the welcome message and the second one comes from the greeting pool
    """
    first = client.post('/asistente/responder', json={"mensaje": "Hola"})
    second = client.post('/asistente/responder', json={"mensaje": "Hola"})

    assert first.status_code == 200
    assert first.get_json() == {"respuesta": replies.FIRST_GREETING}
    assert second.get_json()["respuesta"] in replies.GREETINGS


def test_calendar_answer(client):
    response = client.post('/asistente/responder', json={"mensaje": "¿Qué pasa el 16 de febrero?"})
    assert response.get_json()["respuesta"] == "📅 El 16 de febrero: Día festivo."


def test_unknown_question_gets_fallback(client):
    response = client.post('/asistente/responder', json={"mensaje": "xyzzy"})
    assert response.get_json()["respuesta"] == replies.FALLBACK


def test_missing_message(client):
    response = client.post('/asistente/responder', json={})
    assert response.status_code == 400
    assert "mensaje" in response.get_json()["errors"]


def test_get_is_not_allowed(client):
    response = client.get('/asistente/responder')
    assert response.status_code == 405
    assert response.get_json() == {"error": "Método no permitido."}
