#!/usr/bin/env python3
"""
Quick Start Script for DealerTrack
Drives a running server through a short parts/account/repair-order session.

    python -m dealertrack.main          # in one terminal
    python quickstart.py [base_url]     # in another
"""

import sys
import requests

DEFAULT_URL = "http://localhost:3000"


def quick_start(base_url=DEFAULT_URL):
    api = f"{base_url}/api"
    print(f"🚀 Quick Starting DealerTrack against {base_url}...\n")

    try:
        response = requests.get(f"{base_url}/health", timeout=5)
        response.raise_for_status()
    except requests.RequestException as e:
        print(f"❌ Server not reachable: {e}")
        return False
    print("✅ Server is healthy")

    part = requests.post(f"{api}/parts", json={
        "partNumber": "BRK-100",
        "name": "Front Brake Pad Set",
        "manufacturer": "Bosch",
        "category": "Brakes",
        "quantity": 2,
        "minStock": 5,
        "dealerCost": 10,
        "salesCost": 15,
        "retailPrice": 25,
    }, timeout=5).json()
    print(f"✅ Created part {part['partNumber']} ({part['id']})")

    customer = requests.post(f"{api}/customers", json={
        "type": "Retail",
        "name": "Jane Doe",
        "email": "jane@acmemotors.com",
        "phone": "555-0100",
    }, timeout=5).json()
    print(f"✅ Created account {customer['accountNumber']}")

    order = requests.post(f"{api}/service-orders", json={
        "customerId": customer["id"],
        "customerName": customer["name"],
        "vehicle": "2018 Ford F-150",
        "serviceAdvisor": "Sam",
        "partsUsed": [{"partId": part["id"], "price": 50, "quantity": 2}],
        "laborLines": [{"description": "Replace front pads", "rate": 80, "hours": 1.5}],
    }, timeout=5).json()
    print(f"✅ Created repair order {order['roNumber']}: "
          f"subtotal {order['subtotal']:.2f}, tax {order['tax']:.2f}, total {order['total']:.2f}")

    stats = requests.get(f"{api}/dashboard", timeout=5).json()
    print("\n📊 Dashboard:")
    for key, value in stats.items():
        print(f"   - {key}: {value}")

    for path, record in (("service-orders", order), ("customers", customer), ("parts", part)):
        requests.delete(f"{api}/{path}/{record['id']}", timeout=5).raise_for_status()
    print("\n🧹 Cleaned up sample records")
    return True


if __name__ == "__main__":
    sys.exit(0 if quick_start(*sys.argv[1:2]) else 1)
