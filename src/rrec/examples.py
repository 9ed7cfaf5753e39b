"""
Example recfile builder for demos and tests.

Builds a small library catalogue: a run of untyped notes, then `Book`
records, then `Author` records, including a repeated field name and a
multi-line value.
"""
from rrec.model import Recfile, Record


def build_example_recfile(book_count: int = 2) -> Recfile:
    recfile = Recfile()

    recfile.records.append(Record(fields=[("Note", "catalogue export")]))

    for i in range(1, book_count + 1):
        fields = []
        if i == 1:
            fields.append(("%rec", "Book"))
        fields.extend([
            ("Title", f"Volume {i}"),
            ("Author", "A. Writer"),
            ("Author", f"Co Writer {i}"),
        ])
        recfile.records.append(Record(fields=fields, record_type="Book"))

    recfile.records.append(Record(
        fields=[
            ("%rec", "Author"),
            ("Name", "A. Writer"),
            ("Bio", "Writes books.\nSometimes two at once."),
        ],
        record_type="Author",
    ))

    return recfile


EXAMPLE_TEXT = """\
# catalogue export
Note: catalogue export

%rec: Book
Title: Volume 1
Author: A. Writer
Author: Co Writer 1

Title: Volume 2
Author: A. Writer
Author: Co Writer 2

%rec: Author
Name: A. Writer
Bio: Writes books.
+ Sometimes two \\
at once.
"""
