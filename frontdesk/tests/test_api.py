"""
Integration tests for the hospital administration API.

These tests exercise doctors, rooms, appointments, medical records,
invoices, face sheets and reports through Django REST framework's
APIClient within the APITestCase base class.

To run the tests:

```
pytest -q frontdesk/tests
```
"""
import re

from django.core.cache import cache
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from ..models import FaceSheet, Invoice, User


class HospitalAPITests(APITestCase):
    def setUp(self) -> None:
        cache.clear()
        self.user = User.objects.create_user(username="admin@example.com", password="adminpass", role="admin")
        self.client.force_authenticate(user=self.user)
        self.today = timezone.localdate()

    # helpers ---------------------------------------------------------
    def _create(self, name, data):
        resp = self.client.post(reverse(name), data, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED, resp.data)
        return resp.data["data"]

    def _doctor(self, **extra):
        data = {"fullName": "Dr. Sarah Johnson", "specialization": "Cardiology", "phone": "+1234567894",
                "department": "Cardiology"}
        data.update(extra)
        return self._create("doctors", data)

    def _patient(self, **extra):
        data = {"fullName": "John Doe", "age": 35, "phone": "+1234567890"}
        data.update(extra)
        return self._create("patients", data)

    # doctors ---------------------------------------------------------
    def test_doctor_defaults(self):
        doctor = self._create("doctors", {"fullName": "Dr. Who", "specialization": "General", "phone": "1"})
        self.assertEqual(doctor["consultationFee"], 150)
        self.assertEqual(doctor["maxPatientsPerDay"], 20)
        self.assertEqual(doctor["status"], "Active")
        self.assertEqual(doctor["schedule"]["monday"], {"start": "09:00", "end": "17:00", "available": True})
        self.assertEqual(doctor["schedule"]["saturday"]["end"], "13:00")
        self.assertFalse(doctor["schedule"]["sunday"]["available"])

    def test_doctor_list_filters_and_update(self):
        cardio = self._doctor()
        self._doctor(fullName="Dr. Michael Chen", specialization="Neurology", department="Neurology")
        resp = self.client.get(reverse("doctors"), {"department": "Neurology"})
        self.assertEqual([d["fullName"] for d in resp.data["data"]], ["Dr. Michael Chen"])
        self.assertEqual(resp.data["meta"]["departments"], ["Cardiology", "Neurology"])
        resp = self.client.patch(reverse("doctor_detail", args=[cardio["id"]]), {"status": "On Leave"}, format="json")
        self.assertEqual(resp.data["data"]["status"], "On Leave")
        resp = self.client.get(reverse("doctors"), {"status": "Active"})
        self.assertEqual(len(resp.data["data"]), 1)

    # rooms -----------------------------------------------------------
    def test_room_defaults_status_and_cleaning(self):
        room = self._create("rooms", {"roomNumber": "204", "type": "Private", "floor": 2,
                                      "amenities": "TV, AC", "equipment": ["Oxygen Supply"]})
        self.assertEqual(room["capacity"], 1)
        self.assertEqual(room["dailyRate"], 200)
        self.assertEqual(room["currentOccupancy"], 0)
        self.assertEqual(room["status"], "Available")
        self.assertEqual(room["amenities"], ["TV", "AC"])
        self.assertIsNotNone(room["lastCleaned"])

        resp = self.client.post(reverse("room_status", args=[room["id"]]), {"status": "Maintenance"}, format="json")
        self.assertEqual(resp.data["data"]["status"], "Maintenance")
        resp = self.client.post(reverse("room_clean", args=[room["id"]]))
        self.assertIsNotNone(resp.data["data"]["lastCleaned"])

        resp = self.client.get(reverse("rooms"))
        self.assertEqual(resp.data["meta"], {"total": 1, "available": 0, "occupied": 0, "occupancyRate": 0})

    def test_room_requires_number_type_floor(self):
        resp = self.client.post(reverse("rooms"), {"roomNumber": "1"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(set(resp.data["error"]["fields"]), {"type", "floor"})

    # appointments ----------------------------------------------------
    def test_appointment_fee_follows_specialization(self):
        patient = self._patient()
        fees = {}
        for specialty in ("Cardiology", "Neurology", "Orthopedics"):
            doctor = self._doctor(fullName=f"Dr. {specialty}", specialization=specialty)
            appt = self._create("appointments", {
                "patientId": patient["id"], "doctorId": doctor["id"],
                "appointmentDate": self.today.isoformat(), "appointmentTime": "10:30",
            })
            fees[specialty] = appt["fee"]
            self.assertEqual(appt["status"], "Scheduled")
            self.assertEqual(appt["duration"], 30)
        self.assertEqual(fees, {"Cardiology": 200, "Neurology": 250, "Orthopedics": 150})

    def test_appointment_fee_is_fixed_at_booking(self):
        patient = self._patient()
        doctor = self._doctor()
        appt = self._create("appointments", {
            "patientId": patient["id"], "doctorId": doctor["id"],
            "appointmentDate": self.today.isoformat(), "appointmentTime": "09:00",
        })
        self.client.patch(reverse("doctor_detail", args=[doctor["id"]]), {"specialization": "Neurology"}, format="json")
        resp = self.client.patch(reverse("appointment_detail", args=[appt["id"]]), {"notes": "bring reports", "fee": 1},
                                 format="json")
        self.assertEqual(resp.data["data"]["fee"], 200)

    def test_appointment_status_and_summary(self):
        patient = self._patient()
        doctor = self._doctor()
        appt = self._create("appointments", {
            "patientId": patient["id"], "doctorId": doctor["id"],
            "appointmentDate": self.today.isoformat(), "appointmentTime": "11:00",
        })
        resp = self.client.post(reverse("appointment_status", args=[appt["id"]]), {"status": "Completed"}, format="json")
        self.assertEqual(resp.data["data"]["status"], "Completed")
        resp = self.client.post(reverse("appointment_status", args=[appt["id"]]), {"status": "Bogus"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

        resp = self.client.get(reverse("appointments"), {"q": "johnson"})
        self.assertEqual(len(resp.data["data"]), 1)
        self.assertEqual(resp.data["meta"], {"scheduled": 0, "completed": 1, "today": 1, "todaysFees": 200})

    # medical records -------------------------------------------------
    def test_medical_record_snapshot_and_vitals(self):
        patient = self._patient(currentDiagnosis="Pneumonia")
        doctor = self._doctor()
        record = self._create("medical_records", {
            "patientId": patient["id"], "doctorId": doctor["id"], "chiefComplaint": "Cough",
            "vitalSigns": {"temperature": "98.6", "bloodPressure": "120/80", "heartRate": "", "respiratoryRate": 16},
            "labResults": [{"testName": "CBC", "result": "High WBC", "status": "Critical"}],
        })
        self.assertEqual(record["visitDate"], self.today.isoformat())
        self.assertEqual(record["vitalSigns"], {"temperature": 98.6, "bloodPressure": "120/80", "heartRate": 0,
                                                "respiratoryRate": 16, "oxygenSaturation": 0})
        snapshot = record["faceSheetSnapshot"]
        self.assertEqual(snapshot["full_name"], "John Doe")
        self.assertEqual(snapshot["current_diagnosis"], "Pneumonia")

        # the snapshot is not refreshed by later patient edits
        self.client.patch(reverse("patient_detail", args=[patient["id"]]), {"currentDiagnosis": "Recovered"}, format="json")
        resp = self.client.get(reverse("medical_record_detail", args=[record["id"]]))
        self.assertEqual(resp.data["data"]["faceSheetSnapshot"]["current_diagnosis"], "Pneumonia")
        self.assertEqual(resp.data["meta"]["patient"]["currentDiagnosis"], "Recovered")

        resp = self.client.get(reverse("medical_records"), {"q": "john"})
        self.assertEqual(len(resp.data["data"]), 1)
        self.assertEqual(resp.data["meta"]["criticalResults"], 1)
        self.assertEqual(resp.data["meta"]["thisMonth"], 1)

    def test_medical_record_requires_complaint(self):
        resp = self.client.post(reverse("medical_records"), {"patientId": "x", "doctorId": "y"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("chiefComplaint", resp.data["error"]["fields"])

    # invoices --------------------------------------------------------
    def _invoice_payload(self, patient, **extra):
        data = {
            "patientId": patient["id"],
            "issueDate": self.today.isoformat(),
            "dueDate": self.today.isoformat(),
            "items": [
                {"description": "Consultation", "category": "Consultation", "quantity": 1, "unitPrice": 200, "total": 5},
                {"description": "Room", "category": "Room Charges", "quantity": 3, "unitPrice": 350},
            ],
            "tax": 25,
            "discount": 10,
            "subtotal": 1,
            "total": 1,
        }
        data.update(extra)
        return data

    def test_invoice_totals_recomputed_and_number_generated(self):
        patient = self._patient()
        invoice = self._create("invoices", self._invoice_payload(patient))
        self.assertTrue(re.fullmatch(rf"INV-{self.today.year}-\d{{3}}", invoice["invoiceNumber"]))
        self.assertEqual(invoice["status"], "Pending")
        self.assertEqual([i["total"] for i in invoice["items"]], [200, 1050])
        self.assertEqual(invoice["subtotal"], 1250)
        self.assertEqual(invoice["total"], 1265)

        resp = self.client.patch(reverse("invoice_detail", args=[invoice["id"]]), {"discount": 2000}, format="json")
        self.assertEqual(resp.data["data"]["total"], 0)
        self.assertEqual(resp.data["data"]["subtotal"], 1250)

    def test_invoice_requires_items(self):
        patient = self._patient()
        resp = self.client.post(reverse("invoices"), self._invoice_payload(patient, items=[]), format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Invoice.objects.count(), 0)

    def test_invoice_search_summary_and_print(self):
        patient = self._patient()
        invoice = self._create("invoices", self._invoice_payload(patient, invoiceNumber="INV-2024-007"))
        resp = self.client.get(reverse("invoices"), {"q": "john doe"})
        self.assertEqual([i["invoiceNumber"] for i in resp.data["data"]], ["INV-2024-007"])
        self.assertEqual(resp.data["meta"]["pending"], 1)
        self.assertEqual(resp.data["meta"]["outstandingAmount"], 1265)

        resp = self.client.get(reverse("invoice_print", args=[invoice["id"]]))
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp["Content-Type"].startswith("text/html"))
        html = resp.content.decode()
        self.assertIn("INV-2024-007", html)
        self.assertIn("John Doe", html)
        self.assertIn("window.print()", html)

    def test_invoice_preview_add_and_remove(self):
        resp = self.client.post(reverse("invoice_preview"), {
            "items": [{"quantity": 2, "unitPrice": 10}], "tax": 1, "action": "add",
        }, format="json")
        self.assertEqual(len(resp.data["data"]["items"]), 2)
        self.assertEqual(resp.data["data"]["total"], 21)
        resp = self.client.post(reverse("invoice_preview"), {
            "items": [{"quantity": 2, "unitPrice": 10}], "action": "remove", "index": 0,
        }, format="json")
        self.assertEqual(len(resp.data["data"]["items"]), 1)
        self.assertIn("Laboratory", resp.data["meta"]["categories"])

    # face sheets -----------------------------------------------------
    def test_face_sheet_generation_delete_and_print(self):
        sheet = self._create("face_sheets", {"patientName": "ravi kumar", "age": 40, "contactNo": "9999",
                                             "relativeName": "sita kumar", "patientAddress": "moshi, pune"})
        stamp = self.today.strftime("%y%m")
        self.assertRegex(sheet["prnNo"], rf"^VMH{stamp}/\d{{5}}$")
        self.assertRegex(sheet["ipdNo"], rf"^IPD{stamp}/\d{{5}}$")
        self.assertEqual(sheet["patientName"], "RAVI KUMAR")
        self.assertEqual(sheet["relativeName"], "SITA KUMAR")
        self.assertEqual(sheet["patientAddress"], "MOSHI, PUNE")
        self.assertEqual(sheet["patientCategory"], "CASH")
        self.assertEqual(sheet["typeOfDischarge"], "Normal Discharge")
        self.assertEqual(sheet["dateOfAdmission"], self.today.isoformat())

        resp = self.client.get(reverse("face_sheets"), {"q": sheet["ipdNo"]})
        self.assertEqual(len(resp.data["data"]), 1)

        resp = self.client.get(reverse("face_sheet_print", args=[sheet["id"]]))
        self.assertEqual(resp.status_code, 200)
        self.assertIn("IPD CASE PAPER", resp.content.decode())

        resp = self.client.delete(reverse("face_sheet_detail", args=[sheet["id"]]))
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(FaceSheet.objects.exists())
        resp = self.client.get(reverse("face_sheets"))
        self.assertEqual(resp.data["data"], [])

    def test_face_sheet_delete_missing_keeps_collection(self):
        sheet = self._create("face_sheets", {"patientName": "A", "age": 1, "contactNo": "1"})
        resp = self.client.delete(reverse("face_sheet_detail", args=["00000000-0000-0000-0000-000000000000"]))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        resp = self.client.get(reverse("face_sheets"))
        self.assertEqual([s["id"] for s in resp.data["data"]], [sheet["id"]])

    # reports ---------------------------------------------------------
    def test_report_endpoint(self):
        patient = self._patient(admissionDate="2024-06-15")
        self._create("invoices", self._invoice_payload(patient, issueDate="2024-06-15", dueDate="2024-06-30"))
        resp = self.client.get(reverse("period_report"), {"granularity": "month", "selected": "2024-06-01"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["meta"], {"granularity": "month", "selected": "2024-06-01", "empty": False})
        row = resp.data["data"][0]
        self.assertEqual((row["period"], row["totalRevenue"], row["patientCount"], row["admitted"]),
                         ("June 2024", 1265, 1, 1))

        resp = self.client.get(reverse("period_report"), {"granularity": "day", "selected": "2020-01-01"})
        self.assertEqual(resp.data["data"], [])
        self.assertTrue(resp.data["meta"]["empty"])

        resp = self.client.get(reverse("period_report"), {"granularity": "week"})
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_report_defaults_to_today(self):
        self._patient(admissionDate="2024-06-15")
        patient = self._patient(fullName="Sarah Wilson")
        self._create("invoices", self._invoice_payload(patient))
        resp = self.client.get(reverse("period_report"), {"granularity": "day"})
        self.assertEqual(resp.data["meta"]["selected"], self.today.isoformat())
        self.assertEqual([r["periodKey"] for r in resp.data["data"]], [self.today.isoformat()])
        row = resp.data["data"][0]
        self.assertEqual((row["totalRevenue"], row["patientCount"]), (1265, 1))

    # misc ------------------------------------------------------------
    def test_index_and_not_found(self):
        self.client.force_authenticate(user=None)
        resp = self.client.get(reverse("index"))
        self.assertEqual(resp.status_code, 200)
        self.assertIn("reports", [m["id"] for m in resp.data["data"]])
        resp = self.client.get("/no/such/page")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"]["code"], "not_found")

    def test_healthz(self):
        resp = self.client.get(reverse("healthz"))
        self.assertEqual(resp.json(), {"ok": True, "db": True})
