CERTIFICATE = {"student": "student1", "course_id": 101, "issuer": "issuer1", "issued_date": 1672531200}
PAYMENT = {"course_id": 101, "student": "student1", "tutor": "tutor1", "amount": 1000}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# --- Certificates ---

def test_issue_and_verify_certificate(client):
    response = client.post("/certificates", json=CERTIFICATE)
    assert response.status_code == 201
    assert response.json() == {"ok": {"message": "Certificate issued successfully"}}

    response = client.get("/certificates/student1/101")
    assert response.status_code == 200
    assert response.json() == {"ok": {"issuer": "issuer1", "issued_date": 1672531200}}


def test_duplicate_certificate_conflict(client):
    client.post("/certificates", json=CERTIFICATE)
    response = client.post("/certificates", json=CERTIFICATE)

    assert response.status_code == 409
    assert response.json()["detail"] == {"code": "AlreadyExists", "message": "Certificate already exists"}


def test_verify_missing_certificate(client):
    response = client.get("/certificates/student2/102")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "NotFound"


def test_malformed_request_rejected(client):
    response = client.post("/certificates", json={"student": "student1", "course_id": 101})

    assert response.status_code == 422


def test_empty_student_reaches_ledger(client, ledger):
    response = client.post("/certificates", json={**CERTIFICATE, "student": ""})

    assert response.status_code == 201
    assert ledger.get_certificate("", 101) is not None


# --- Scholarships ---

def test_grant_and_claim_scholarship(client, ledger):
    response = client.post("/scholarships", json={"student": "student1", "amount": 5000, "eligibility_date": 2000})
    assert response.status_code == 201

    response = client.post("/scholarships/student1/claim", json={"current_height": 2000})
    assert response.status_code == 200
    assert response.json() == {"ok": {"message": "Scholarship claimed successfully"}}
    assert not ledger.has_scholarship("student1")


def test_grant_scholarship_invalid_amount(client):
    response = client.post("/scholarships", json={"student": "student1", "amount": 0, "eligibility_date": 2000})

    assert response.status_code == 400
    assert response.json()["detail"] == {"code": "InvalidAmount", "message": "Amount must be greater than 0"}


def test_claim_scholarship_too_early(client):
    client.post("/scholarships", json={"student": "student1", "amount": 5000, "eligibility_date": 2000})
    response = client.post("/scholarships/student1/claim", json={"current_height": 1500})

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "NotEligible"


def test_claim_missing_scholarship(client):
    response = client.post("/scholarships/student9/claim", json={"current_height": 2000})

    assert response.status_code == 404
    assert response.json()["detail"] == {"code": "NotFound", "message": "Scholarship not found"}


# --- Course payments ---

def test_register_course_payment_invalid_amount(client, ledger):
    response = client.post("/course-payments", json={**PAYMENT, "amount": -5})

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "InvalidAmount"
    assert ledger.get_course_payment("student1", 101) is None


def test_complete_missing_payment(client):
    response = client.post("/course-payments/student1/101/complete", json={"tutor": "tutor1"})

    assert response.status_code == 404
    assert response.json()["detail"] == {"code": "NotFound", "message": "Payment not found"}


def test_complete_course_wrong_tutor(client):
    client.post("/course-payments", json=PAYMENT)
    response = client.post("/course-payments/student1/101/complete", json={"tutor": "tutor2"})

    assert response.status_code == 403
    assert response.json()["detail"] == {
        "code": "Unauthorized",
        "message": "Only the assigned tutor can mark completion",
    }


def test_complete_course_and_read_events(client):
    client.post("/course-payments", json=PAYMENT)

    response = client.post("/course-payments/student1/101/complete", json={"tutor": "tutor1"})
    assert response.status_code == 200

    response = client.post("/course-payments/student1/101/complete", json={"tutor": "tutor1"})
    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "AlreadyCompleted"

    response = client.get("/events/payments")
    assert response.json() == [{
        "event_type": "payment_completed",
        "student": "student1",
        "course_id": 101,
        "tutor": "tutor1",
        "amount": 1000,
    }]


def test_unknown_event_log(client):
    assert client.get("/events/grades").status_code == 404


def test_statistics_and_reset(client):
    client.post("/certificates", json=CERTIFICATE)
    assert client.get("/statistics").json()["certificates"] == 1

    assert client.post("/reset").json() == {"status": "reset"}
    assert client.get("/statistics").json()["certificates"] == 0
    assert client.get("/certificates/student1/101").status_code == 404
