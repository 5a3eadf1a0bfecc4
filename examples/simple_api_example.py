#!/usr/bin/env python3
"""
Example of building a document model.

Builds a cover section with a first-page header and a body section with
numbered titles, then prints what a writer would see.
"""

from docx_composer import Document, Header, configure_logging


def main():
    """Build a two-section document."""
    configure_logging("DEBUG")

    document = Document()

    # 1. Cover section with a distinct first page
    print("📄 Building cover section...")
    cover = document.add_section({"orientation": "portrait", "margin_top": 2000})
    cover.add_header(Header.FIRST).add_text("ACME Corp.")
    cover.add_header().add_text("ACME Corp. - internal")
    cover.add_footer().add_preserve_text("Page {PAGE} of {NUMPAGES}")
    toc = cover.add_toc(max_depth=2)
    cover.add_page_break()

    # 2. Body section in two columns
    print("📋 Building body section...")
    body = document.add_section({"colsNum": 2, "breakType": "nextPage"})
    body.add_title("Introduction")
    body.add_text("Scope of this report.")
    body.add_title("Background", 2)
    table = body.add_table("Grid")
    row = table.add_row()
    row.add_cell(3000).add_text("Quarter")
    row.add_cell(3000).add_text("Revenue")

    # 3. What a writer walks
    for section in document.get_sections():
        print(f"   Section {section.get_section_id()}: "
              f"{section.count_elements()} elements, "
              f"{len(section.get_headers())} headers, "
              f"{len(section.get_footers())} footers, "
              f"different first page: {section.has_different_first_page()}")

    print(f"   TOC entries: {[title.get_text() for title in toc.get_titles()]}")


if __name__ == "__main__":
    main()
