import inspect
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from dealertrack.database import PARTS, JsonStore, get_store
from dealertrack.main import app


class TestDealerTrackAPI(unittest.TestCase):
    BASE_URL = "/api"

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.store = JsonStore(self.tmp.name)
        self.store.initialize()
        app.dependency_overrides[get_store] = lambda: self.store
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.tmp.cleanup()

    def create_part(self, **fields):
        body = {"partNumber": "BRK-100", "name": "Brake Pad"}
        body.update(fields)
        response = self.client.post(f"{self.BASE_URL}/parts", json=body)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_storage_routes_run_in_threadpool(self):
        """Test storage-backed handlers are plain functions, not coroutines"""
        api_routes = [r for r in app.routes if getattr(r, "path", "").startswith(self.BASE_URL)]
        self.assertTrue(api_routes)
        for route in api_routes:
            self.assertFalse(inspect.iscoroutinefunction(route.endpoint), route.path)

    def test_health_check(self):
        """Test health check endpoint"""
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_parts_crud(self):
        """Test parts create, read, update and delete"""
        part = self.create_part(quantity="2", minStock=5, dealerCost=10, salesCost=15, retailPrice=25)
        self.assertEqual(part["partNumber"], "BRK-100")
        self.assertEqual(part["quantity"], 2)
        self.assertEqual(part["retailPrice"], 25)
        self.assertEqual(part["laborCost"], 0)
        self.assertTrue(part["id"])

        response = self.client.get(f"{self.BASE_URL}/parts")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([p["id"] for p in response.json()], [part["id"]])

        response = self.client.get(f"{self.BASE_URL}/parts/{part['id']}")
        self.assertEqual(response.json(), part)

        response = self.client.put(f"{self.BASE_URL}/parts/{part['id']}", json={"quantity": 12})
        self.assertEqual(response.status_code, 200)
        updated = response.json()
        self.assertEqual(updated["quantity"], 12)
        self.assertEqual(updated["name"], "Brake Pad")
        self.assertEqual(updated["minStock"], 5)

        response = self.client.delete(f"{self.BASE_URL}/parts/{part['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True})
        self.assertEqual(self.client.get(f"{self.BASE_URL}/parts").json(), [])

    def test_part_non_numeric_fields_become_zero(self):
        part = self.create_part(quantity="lots", dealerCost="", retailPrice=None)
        self.assertEqual(part["quantity"], 0)
        self.assertEqual(part["dealerCost"], 0)
        self.assertEqual(part["retailPrice"], 0)

    def test_part_requires_part_number(self):
        response = self.client.post(f"{self.BASE_URL}/parts", json={"name": "Brake Pad"})
        self.assertEqual(response.status_code, 422)
        response = self.client.post(f"{self.BASE_URL}/parts", json={"partNumber": ""})
        self.assertEqual(response.status_code, 422)

    def test_parts_search(self):
        self.create_part()
        self.create_part(partNumber="OIL-5", name="Oil Filter")
        response = self.client.get(f"{self.BASE_URL}/parts", params={"q": "oil"})
        self.assertEqual([p["partNumber"] for p in response.json()], ["OIL-5"])

    def test_unknown_ids_return_404(self):
        for collection in ("parts", "customers", "service-orders"):
            response = self.client.put(f"{self.BASE_URL}/{collection}/nope", json={})
            self.assertEqual(response.status_code, 404, collection)
            self.assertIn("not found", response.json()["detail"])
            response = self.client.get(f"{self.BASE_URL}/{collection}/nope")
            self.assertEqual(response.status_code, 404, collection)

    def test_delete_unknown_id_succeeds(self):
        for collection in ("parts", "customers", "service-orders"):
            response = self.client.delete(f"{self.BASE_URL}/{collection}/nope")
            self.assertEqual(response.status_code, 200, collection)
            self.assertEqual(response.json(), {"success": True})

    def test_customers(self):
        """Test customer creation and partial update"""
        response = self.client.post(f"{self.BASE_URL}/customers", json={
            "type": "Wholesale",
            "name": "Jane Doe",
            "company": "Acme Motors",
            "email": "jane@acmemotors.com",
            "phone": "555-0100",
            "creditLimit": "2500",
        })
        self.assertEqual(response.status_code, 201, response.text)
        customer = response.json()
        self.assertTrue(customer["accountNumber"].startswith("ACC"))
        self.assertEqual(customer["balance"], 0)
        self.assertEqual(customer["creditLimit"], 2500)
        self.assertFalse(customer["taxExempt"])

        response = self.client.put(f"{self.BASE_URL}/customers/{customer['id']}", json={"taxExempt": True})
        updated = response.json()
        self.assertTrue(updated["taxExempt"])
        self.assertEqual(updated["accountNumber"], customer["accountNumber"])
        self.assertEqual(updated["email"], "jane@acmemotors.com")

        response = self.client.get(f"{self.BASE_URL}/customers", params={"q": "acme"})
        self.assertEqual(len(response.json()), 1)

    def test_customer_invalid_email(self):
        response = self.client.post(f"{self.BASE_URL}/customers", json={"name": "Jane", "email": "not-an-email"})
        self.assertEqual(response.status_code, 422)

    def test_service_order_totals(self):
        """Test service order totals are computed on create and update"""
        response = self.client.post(f"{self.BASE_URL}/service-orders", json={
            "customerName": "Jane Doe",
            "vehicle": "2018 Ford F-150",
            "mileage": "48000",
            "partsUsed": [{"partNumber": "BRK-100", "price": 50, "quantity": 2}],
            "laborLines": [{"description": "Front brakes", "rate": 80, "hours": 1.5}],
            "total": 1,
        })
        self.assertEqual(response.status_code, 201, response.text)
        order = response.json()
        self.assertEqual(order["status"], "Open")
        self.assertTrue(order["roNumber"].startswith("RO"))
        self.assertEqual(order["subtotal"], 220)
        self.assertEqual(order["tax"], 18.15)
        self.assertEqual(order["total"], 238.15)
        self.assertEqual(order["partsUsed"][0]["partNumber"], "BRK-100")

        response = self.client.put(f"{self.BASE_URL}/service-orders/{order['id']}", json={"status": "Completed"})
        updated = response.json()
        self.assertEqual(updated["status"], "Completed")
        self.assertEqual(updated["total"], 238.15)

        response = self.client.put(f"{self.BASE_URL}/service-orders/{order['id']}", json={"partsUsed": []})
        self.assertEqual(response.json()["subtotal"], 120)

        response = self.client.get(f"{self.BASE_URL}/service-orders", params={"status": "Completed"})
        self.assertEqual(len(response.json()), 1)
        response = self.client.get(f"{self.BASE_URL}/service-orders", params={"status": "Open"})
        self.assertEqual(response.json(), [])

    def test_null_line_items_are_stored_as_empty(self):
        """Test an explicit null line list clears the lines without breaking reads"""
        response = self.client.post(f"{self.BASE_URL}/service-orders", json={
            "partsUsed": [{"price": 50, "quantity": 2}],
            "laborLines": [{"rate": 80, "hours": 1.5}],
        })
        order = response.json()

        response = self.client.put(f"{self.BASE_URL}/service-orders/{order['id']}", json={"partsUsed": None})
        self.assertEqual(response.status_code, 200, response.text)
        updated = response.json()
        self.assertEqual(updated["partsUsed"], [])
        self.assertEqual(updated["subtotal"], 120)

        response = self.client.put(f"{self.BASE_URL}/service-orders/{order['id']}", json={"laborLines": None})
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["total"], 0)

        response = self.client.get(f"{self.BASE_URL}/service-orders")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()[0]["laborLines"], [])
        response = self.client.get(f"{self.BASE_URL}/dashboard/recent-orders")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.store.read("service_orders")[0]["partsUsed"], [])

    def test_service_order_create_defaults_to_open(self):
        response = self.client.post(f"{self.BASE_URL}/service-orders", json={"vehicle": "2018 Ford F-150"})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["status"], "Open")

    def test_service_order_rejects_malformed_lines(self):
        response = self.client.post(f"{self.BASE_URL}/service-orders", json={
            "partsUsed": [{"price": "abc", "quantity": 1}],
        })
        self.assertEqual(response.status_code, 422)
        response = self.client.post(f"{self.BASE_URL}/service-orders", json={
            "laborLines": [{"rate": 80}],
        })
        self.assertEqual(response.status_code, 422)

    def test_dashboard(self):
        """Test dashboard endpoints"""
        self.create_part(quantity=2, minStock=5)
        self.create_part(partNumber="OIL-5", quantity=50, minStock=5)
        self.client.post(f"{self.BASE_URL}/customers", json={"name": "Jane"})
        self.client.post(f"{self.BASE_URL}/service-orders", json={
            "partsUsed": [{"price": 50, "quantity": 2}],
            "laborLines": [{"rate": 80, "hours": 1.5}],
        })
        self.client.post(f"{self.BASE_URL}/service-orders", json={"status": "Completed"})

        response = self.client.get(f"{self.BASE_URL}/dashboard")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "totalParts": 2,
            "lowStockParts": 1,
            "totalCustomers": 1,
            "openServiceOrders": 1,
            "totalServiceOrders": 2,
            "totalRevenue": 238.15,
        })

        response = self.client.get(f"{self.BASE_URL}/dashboard/low-stock")
        self.assertEqual([p["partNumber"] for p in response.json()], ["BRK-100"])

        response = self.client.get(f"{self.BASE_URL}/dashboard/recent-orders", params={"limit": 1})
        self.assertEqual([o["status"] for o in response.json()], ["Completed"])

    def test_corrupt_document_returns_500(self):
        (Path(self.tmp.name) / f"{PARTS}.json").write_text("not json")
        response = self.client.get(f"{self.BASE_URL}/parts")
        self.assertEqual(response.status_code, 500)
        self.assertIn("parts", response.json()["detail"])
        response = self.client.get(f"{self.BASE_URL}/dashboard")
        self.assertEqual(response.status_code, 500)

    def test_missing_document_returns_500(self):
        (Path(self.tmp.name) / "customers.json").unlink()
        response = self.client.post(f"{self.BASE_URL}/customers", json={"name": "Jane"})
        self.assertEqual(response.status_code, 500)


if __name__ == '__main__':
    unittest.main()
