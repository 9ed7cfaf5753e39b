#!/usr/bin/env python3
"""
Round-trip Demo: text → Recfile → filter → text / JSON

Shows the full workflow:
1. Parse recfile text
2. Look at records and their types
3. Keep only one record type
4. Write back out, and export as JSON
"""

from rrec.examples import EXAMPLE_TEXT
from rrec.parser import parse_string
from rrec.serialization import recfile_to_json_objects


def main():
    print("=" * 70)
    print("ROUND-TRIP DEMO: text → Recfile → filter → text / JSON")
    print("=" * 70)

    print("\n1. PARSING...")
    recfile = parse_string(EXAMPLE_TEXT)
    print(f"   ✓ Records: {len(recfile)}")

    print("\n2. RECORDS...")
    for record in recfile:
        print(f"   - type={record.record_type!r} fields={record.size()}")

    print("\n3. FILTERING (Book)...")
    books = list(recfile.iter_by_type("Book"))
    print(f"   ✓ Books: {len(books)}")
    for book in books:
        print(f"   - {book.get('Title')} by {', '.join(book.get_all('Author'))}")

    print("\n4. WRITING...")
    recfile.filter_by_type("Author")
    print(recfile.dumps())

    print("5. JSON...")
    print(recfile_to_json_objects(recfile, pretty=True))


if __name__ == "__main__":
    main()
