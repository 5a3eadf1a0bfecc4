"""
Tests for Section class.

This module contains unit tests for section construction, body elements,
header/footer variants and settings merging.
"""

import pytest

from docx_composer import (
    ConfigurationError,
    Footer,
    Header,
    HeaderFooterType,
    PageBreak,
    Section,
    Table,
    Title,
    TOC,
    ValidationError,
)
from docx_composer.models.text import PreserveText


class TestSectionInit:
    """Test cases for Section construction."""

    def test_init(self):
        """Test Section initialization without a document."""
        section = Section(3)

        assert section.get_section_id() == 3
        assert section.get_doc_part_address() == ("section", 3)
        assert section.get_document() is None
        assert section.get_elements() == []
        assert dict(section.get_headers()) == {}
        assert dict(section.get_footers()) == {}

    def test_init_default_settings(self):
        """Test settings are created with defaults."""
        section = Section(1)

        settings = section.get_settings()
        assert settings.page_size_w == 11906
        assert settings.page_size_h == 16838
        assert settings.margin_top == 1440

    def test_init_with_settings(self):
        """Test settings overrides passed to the constructor."""
        section = Section(1, {"margin_left": 720, "margin_right": None, "colsNum": 2})

        settings = section.get_settings()
        assert settings.margin_left == 720
        assert settings.margin_right == 1440
        assert settings.cols_num == 2

    def test_init_with_unknown_setting(self):
        """Test unknown settings propagate the configuration error."""
        with pytest.raises(ConfigurationError):
            Section(1, {"page_colour": "red"})


class TestSectionSettings:
    """Test cases for sparse settings merge."""

    def test_none_never_overwrites(self, section):
        """Test that None values keep the previous value."""
        section.set_settings({"margin_top": 100, "margin_bottom": None})
        section.set_settings({"margin_top": None, "margin_bottom": 200})

        settings = section.get_settings()
        assert settings.margin_top == 100
        assert settings.margin_bottom == 200

    def test_set_settings_none(self, section):
        """Test that a missing overrides mapping is a no-op."""
        before = section.get_settings().to_dict()

        section.set_settings(None)

        assert section.get_settings().to_dict() == before

    def test_settings_object_is_kept(self, section):
        """Test settings are updated field by field, never replaced."""
        settings = section.get_settings()

        section.set_settings({"orientation": "landscape"})

        assert section.get_settings() is settings
        assert settings.is_landscape()

    def test_invalid_value(self, section):
        """Test malformed values are rejected by the settings object."""
        with pytest.raises(ConfigurationError):
            section.set_settings({"margin_top": -5})

    def test_failed_merge_leaves_settings(self, section):
        """Test a rejected merge does not apply its valid keys."""
        with pytest.raises(ConfigurationError):
            section.set_settings({"margin_left": 100, "paper": "B9"})

        assert section.get_settings().margin_left == 1440
        assert section.get_settings().paper == "A4"


class TestSectionBodyElements:
    """Test cases for body element factories."""

    def test_add_title_registers_bookmark(self, document, section):
        """Test titles receive bookmark IDs from the document."""
        first = section.add_title("Introduction")
        second = section.add_title("Scope", 2)

        assert isinstance(first, Title)
        assert first.get_bookmark_id() == 1
        assert second.get_bookmark_id() == 2
        assert second.depth == 2
        assert document.get_titles() == [first, second]

    def test_add_title_without_document(self, standalone_section):
        """Test titles without a document keep no bookmark ID."""
        title = standalone_section.add_title("Orphan")

        assert title.get_bookmark_id() is None
        assert title.get_anchor() is None
        assert standalone_section.get_elements() == [title]

    def test_add_title_depth_not_validated(self, standalone_section):
        """Test depth is stored as given."""
        title = standalone_section.add_title("Deep", 12)

        assert title.get_depth() == 12

    def test_add_title_part_address(self, document):
        """Test title carries the section part address."""
        document.add_section()
        section = document.add_section()

        title = section.add_title("Second section")

        assert title.get_doc_part_address() == ("section", 2)

    def test_add_page_break(self, section):
        """Test adding a page break."""
        page_break = section.add_page_break()

        assert isinstance(page_break, PageBreak)
        assert section.get_elements() == [page_break]

    def test_add_table(self, section):
        """Test adding a table."""
        table = section.add_table("Grid")

        assert isinstance(table, Table)
        assert table.style == "Grid"
        assert table.get_doc_part_address() == ("section", 1)
        assert table.get_document() is section.get_document()

    def test_add_toc(self, section):
        """Test adding a table of contents."""
        toc = section.add_toc({"bold": True}, None, 2, 3)

        assert isinstance(toc, TOC)
        assert toc.get_min_depth() == 2
        assert toc.get_max_depth() == 3
        assert toc.font_style == {"bold": True}

    def test_add_toc_defaults(self, section):
        """Test default TOC depth bounds."""
        toc = section.add_toc()

        assert (toc.get_min_depth(), toc.get_max_depth()) == (1, 9)

    def test_insertion_order(self, section):
        """Test body elements keep call order across element types."""
        first = section.add_title("One")
        table = section.add_table()
        page_break = section.add_page_break()
        second = section.add_title("Two")
        toc = section.add_toc()

        assert section.get_elements() == [first, table, page_break, second, toc]
        assert [element.element_index for element in section.get_elements()] == [1, 2, 3, 4, 5]

    def test_add_text(self, section):
        """Test generic text factories."""
        text = section.add_text("Hello")
        breaks = section.add_text_break(2)

        assert text.get_text() == "Hello"
        assert len(breaks) == 2
        assert section.count_elements() == 3

    def test_preserve_text_not_allowed(self, section):
        """Test field text is reserved for headers and footers."""
        with pytest.raises(ValidationError):
            section.add_element(PreserveText("{PAGE}"))

        assert section.count_elements() == 0

    def test_get_elements_is_copy(self, section):
        """Test the returned element list does not alias the container."""
        section.add_page_break()

        elements = section.get_elements()
        elements.clear()

        assert section.count_elements() == 1


class TestSectionHeadersFooters:
    """Test cases for header and footer variants."""

    @pytest.mark.parametrize("header_type", list(HeaderFooterType))
    def test_add_headers_of_type(self, section, header_type):
        """Test n headers are keyed 1..n with the requested type."""
        for _ in range(3):
            section.add_header(header_type)

        headers = section.get_headers()
        assert list(headers.keys()) == [1, 2, 3]
        assert all(header.get_type() == header_type for header in headers.values())

    def test_add_header_string_type(self, section):
        """Test string placement values are accepted."""
        header = section.add_header("first")

        assert header.get_type() is HeaderFooterType.FIRST

    def test_add_header_default(self, section):
        """Test default placement type."""
        header = section.add_header()

        assert isinstance(header, Header)
        assert header.get_type() is HeaderFooterType.AUTO
        assert header.get_index() == 1
        assert header.get_section_id() == 1

    @pytest.mark.parametrize("invalid", ["odd", "FIRST", "", None, 1])
    def test_add_header_invalid_type(self, section, invalid):
        """Test invalid types fail without touching the collection."""
        section.add_header()
        before = dict(section.get_headers())

        with pytest.raises(ValidationError, match="Invalid header/footer type"):
            section.add_header(invalid)

        assert dict(section.get_headers()) == before

    def test_add_footer_invalid_type(self, section):
        """Test invalid footer types fail."""
        with pytest.raises(ValidationError):
            section.add_footer("odd")

        assert len(section.get_footers()) == 0

    def test_headers_and_footers_numbered_independently(self, section):
        """Test headers and footers have separate index spaces."""
        section.add_header()
        section.add_header(Header.FIRST)
        footer = section.add_footer()

        assert list(section.get_headers().keys()) == [1, 2]
        assert list(section.get_footers().keys()) == [1]
        assert isinstance(footer, Footer)
        assert footer.get_index() == 1

    def test_variant_gets_document(self, document, section):
        """Test variants share the section's document reference."""
        header = section.add_header()
        footer = section.add_footer()

        assert header.get_document() is document
        assert footer.get_document() is document

    def test_variant_without_document(self, standalone_section):
        """Test variants work without a document."""
        header = standalone_section.add_header()

        assert header.get_document() is None

    def test_set_document_reaches_variants(self, document, standalone_section):
        """Test attaching a document later updates existing variants."""
        header = standalone_section.add_header()
        text = standalone_section.add_footer().add_text("Footer")

        standalone_section.set_document(document)

        assert header.get_document() is document
        assert text.get_document() is document

    def test_variant_part_address(self, document):
        """Test variants are addressed by section and index."""
        document.add_section()
        section = document.add_section()

        header = section.add_header()
        footer = section.add_footer(Footer.EVEN)

        assert header.get_doc_part_address() == ("header", (2, 1))
        assert footer.get_doc_part_address() == ("footer", (2, 1))
        assert header.get_part_number() == 4

    def test_variant_part_addresses_distinct_across_sections(self, document):
        """Test a fourth header does not share its part with the next section."""
        first = document.add_section()
        second = document.add_section()

        headers = [first.add_header() for _ in range(4)]
        headers.append(second.add_header())
        texts = [header.add_text(f"Header {number}") for number, header in enumerate(headers, 1)]

        addresses = [header.get_doc_part_address() for header in headers]
        assert len(set(addresses)) == 5
        assert addresses[3] == ("header", (1, 4))
        assert addresses[4] == ("header", (2, 1))
        assert [text.get_doc_part_address() for text in texts] == addresses

    def test_mixed_header_types(self, section):
        """Test each index keeps the type it was added with."""
        sequence = [
            HeaderFooterType.AUTO,
            HeaderFooterType.FIRST,
            HeaderFooterType.EVEN,
            HeaderFooterType.AUTO,
        ]
        for header_type in sequence:
            section.add_header(header_type)

        headers = section.get_headers()
        assert {index: header.get_type() for index, header in headers.items()} == {
            1: HeaderFooterType.AUTO,
            2: HeaderFooterType.FIRST,
            3: HeaderFooterType.EVEN,
            4: HeaderFooterType.AUTO,
        }
        assert [header.get_index() for header in headers.values()] == [1, 2, 3, 4]

    def test_get_headers_read_only(self, section):
        """Test the header mapping cannot be mutated through the view."""
        section.add_header()

        headers = section.get_headers()
        with pytest.raises(TypeError):
            headers[5] = Header(1, 5)

        assert list(section.get_headers().keys()) == [1]

    def test_has_different_first_page_empty(self, section):
        """Test no headers means no distinct first page."""
        assert section.has_different_first_page() is False

    def test_has_different_first_page(self, section):
        """Test first page detection stays true as headers are added."""
        section.add_header()
        assert section.has_different_first_page() is False

        section.add_header(HeaderFooterType.FIRST)
        assert section.has_different_first_page() is True

        section.add_header(HeaderFooterType.EVEN)
        assert section.has_different_first_page() is True

    def test_first_footer_does_not_count(self, section):
        """Test only headers signal a distinct first page."""
        section.add_footer(HeaderFooterType.FIRST)

        assert section.has_different_first_page() is False

    def test_create_header_deprecated(self, section):
        """Test deprecated header alias."""
        with pytest.deprecated_call():
            header = section.create_header()

        assert section.get_headers()[1] is header

    def test_create_footer_deprecated(self, section):
        """Test deprecated footer alias."""
        with pytest.deprecated_call():
            footer = section.create_footer()

        assert section.get_footers()[1] is footer


class TestSectionExport:
    """Test cases for dictionary and XML snapshots."""

    def test_to_dict(self, section):
        """Test dictionary snapshot."""
        section.add_title("Heading")
        section.add_header(HeaderFooterType.FIRST).add_text("Cover")
        section.add_footer()

        result = section.to_dict()

        assert result['type'] == "Section"
        assert result['attributes']['different_first_page'] is True
        assert result['children'][0]['attributes']['bookmark_id'] == 1
        assert list(result['headers']) == [1]
        assert result['headers'][1]['children'][0]['doc_part'] == "header"
        assert list(result['footers']) == [1]
        assert result['settings']['page_size_w'] == 11906

    def test_to_xml(self, section):
        """Test XML snapshot."""
        section.add_title("Heading")
        section.add_header()

        element = section.to_xml()

        assert element.tag == "section"
        assert [child.tag for child in element] == ["title", "header"]
        assert element[0].get("bookmark_id") == "1"
        assert element[1].get("type") == "default"

    def test_to_xml_strips_control_characters(self, section):
        """Test code points XML cannot carry are dropped from the snapshot."""
        title = section.add_title("Intro\x0b")
        section.add_text("Tab\tand\x00null")

        element = section.to_xml()

        assert element[0].get("text") == "Intro"
        assert element[1].get("text") == "Tab\tandnull"
        assert title.get_text() == "Intro\x0b"

    def test_to_xml_variant_part_id(self, document):
        """Test header part addresses are rendered in the snapshot."""
        section = document.add_section()
        section.add_header().add_text("Top")

        header = section.to_xml()[0]

        assert header.get("doc_part") == "header"
        assert header.get("doc_part_id") == "(1, 1)"
        assert header[0].get("doc_part_id") == "(1, 1)"
