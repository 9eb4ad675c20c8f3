"""
Basic usage examples for CEPFinder.

This script looks up a postal code on ViaCEP and prints the result in
every supported format.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import cepfinder


def main():
    print("CEPFinder - Basic Usage Examples")
    print("=" * 40)

    record = cepfinder.AddressRecord("01001000")

    print("\n1. Lookup")
    print("-" * 20)
    try:
        status = record.lookup()
    except cepfinder.TransportError as e:
        print(f"Could not reach ViaCEP: {e}")
        return

    print(f"HTTP status: {status}")
    if status != 200:
        return

    print("\n2. Field Access")
    print("-" * 20)
    print(f"Street: {record.street}")
    print(f"City: {record.get('localidade')}")
    print(f"State: {record.get('uf')}")

    print("\n3. JSON")
    print("-" * 20)
    print(record.to_json())

    print("\n4. XML")
    print("-" * 20)
    record.set("complement", "lado ímpar")
    print(record.to_xml_string())


if __name__ == "__main__":
    main()
