#!/usr/bin/env python3
"""
Demo scenario for the EduLedger REST API.
"""

import sys
import os
import json

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from eduledger.main import EduLedgerPlatform


def show(label, response):
    print(f"  {label}: {response.status_code} {json.dumps(response.json())}")


def run_demo():
    """Drive every ledger flow over HTTP."""
    print("=" * 60)
    print("EDULEDGER - DEMO")
    print("=" * 60)

    platform = EduLedgerPlatform({'log_level': 'WARNING'})
    client = TestClient(platform.app)

    print("\n1. Certificates...")
    demonstrate_certificates(client)

    print("\n2. Scholarships...")
    demonstrate_scholarships(client)

    print("\n3. Course payments...")
    demonstrate_course_payments(client)

    print("\n4. Event logs and statistics...")
    show("scholarship events", client.get("/events/scholarships"))
    show("payment events", client.get("/events/payments"))
    show("statistics", client.get("/statistics"))

    print("\n" + "=" * 60)
    print("DEMO COMPLETED")
    print("=" * 60)


def demonstrate_certificates(client):
    certificate = {"student": "student1", "course_id": 101, "issuer": "issuer1", "issued_date": 1672531200}
    show("issue", client.post("/certificates", json=certificate))
    show("issue again", client.post("/certificates", json=certificate))
    show("verify", client.get("/certificates/student1/101"))
    show("verify unknown", client.get("/certificates/student2/102"))


def demonstrate_scholarships(client):
    show("grant zero", client.post("/scholarships", json={"student": "student1", "amount": 0, "eligibility_date": 2000}))
    show("grant", client.post("/scholarships", json={"student": "student1", "amount": 5000, "eligibility_date": 2000}))
    show("claim early", client.post("/scholarships/student1/claim", json={"current_height": 1999}))
    show("claim", client.post("/scholarships/student1/claim", json={"current_height": 2000}))
    show("claim again", client.post("/scholarships/student1/claim", json={"current_height": 2000}))


def demonstrate_course_payments(client):
    payment = {"course_id": 101, "student": "student1", "tutor": "tutor1", "amount": 1000}
    show("register", client.post("/course-payments", json=payment))
    show("complete as tutor2", client.post("/course-payments/student1/101/complete", json={"tutor": "tutor2"}))
    show("complete as tutor1", client.post("/course-payments/student1/101/complete", json={"tutor": "tutor1"}))
    show("complete again", client.post("/course-payments/student1/101/complete", json={"tutor": "tutor1"}))


if __name__ == "__main__":
    run_demo()
