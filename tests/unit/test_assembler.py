"""Tests for PageAssembler - page state machine and hand-off."""

from collections.abc import Callable

import pytest

from serialized_form.assembler import PageAssembler, PageState
from serialized_form.core.delegates import SerialFieldWriter, SerialMethodWriter
from serialized_form.errors import ContractViolation, DocumentOutputFailure
from serialized_form.models.node import DocumentNode, Role
from tests.unit.fakes import FakeConfiguration, FakeNavigation, FakePrinter
from tests.unit.samples import BASE, ORDER, THROWABLE

MakeAssembler = Callable[..., PageAssembler]


def _finish(assembler: PageAssembler) -> DocumentNode:
    assembler.open_header("Serialized Form")
    assembler.attach_serialized_content(assembler.open_summaries_section())
    assembler.close_footer()
    return assembler.hand_off()


def test_open_header_builds_body_with_header_and_title(
    make_assembler: MakeAssembler, navigation: FakeNavigation
) -> None:
    assembler = make_assembler()

    body = assembler.open_header("Serialized Form")

    assert assembler.state is PageState.HEADER_OPEN
    assert body.role == Role.BODY
    header, main = body.children
    assert isinstance(header, DocumentNode) and header.role == Role.HEADER
    assert header.text() == "top-nav"
    assert navigation.calls == [True]
    assert main is assembler.content
    (title_div,) = main.children
    assert isinstance(title_div, DocumentNode) and title_div.styles == ("header",)
    (heading,) = title_div.children
    assert isinstance(heading, DocumentNode)
    assert (heading.level, heading.styles, heading.text()) == (1, ("title",), "Serialized Form")
    assert assembler.window_title == "Serialized Form"


def test_open_header_twice_is_rejected(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    assembler.open_header("Serialized Form")

    with pytest.raises(ContractViolation, match="open_header"):
        assembler.open_header("Again")


def test_body_is_unavailable_before_header(make_assembler: MakeAssembler) -> None:
    with pytest.raises(ContractViolation, match="before open_header"):
        _ = make_assembler().body


def test_attach_before_header_is_rejected(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()

    with pytest.raises(ContractViolation, match="created"):
        assembler.attach_serialized_content(DocumentNode(Role.LIST))


def test_attach_appends_in_call_order(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    assembler.open_header("Serialized Form")
    trees = [assembler.open_summaries_section() for _ in range(3)]

    for tree in trees:
        assembler.attach_serialized_content(tree)

    assert assembler.state is PageState.BODY_ACCUMULATING
    containers = assembler.content.children[1:]
    assert len(containers) == 3
    for container, tree in zip(containers, trees, strict=True):
        assert isinstance(container, DocumentNode)
        assert container.styles == ("serializedFormContainer",)
        assert container.children == (tree,)


def test_attach_leaves_earlier_trees_untouched(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    assembler.open_header("Serialized Form")
    first = assembler.open_summaries_section().append("first")
    assembler.attach_serialized_content(first)
    before = assembler.content.children

    assembler.attach_serialized_content(assembler.open_summaries_section())

    assert assembler.content.children[: len(before)] == before
    assert first.children == ("first",)


def test_attaching_same_tree_twice_is_rejected(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    assembler.open_header("Serialized Form")
    tree = assembler.open_summaries_section()
    assembler.attach_serialized_content(tree)

    with pytest.raises(ContractViolation, match="already attached"):
        assembler.attach_serialized_content(tree)


def test_close_footer_appends_footer_once(
    make_assembler: MakeAssembler, navigation: FakeNavigation
) -> None:
    assembler = make_assembler()
    assembler.open_header("Serialized Form")
    assembler.attach_serialized_content(assembler.open_summaries_section())

    assembler.close_footer()

    footer = assembler.body.children[-1]
    assert isinstance(footer, DocumentNode) and footer.role == Role.FOOTER
    assert footer.text() == "bottom-nav"
    assert navigation.calls == [True, False]
    with pytest.raises(ContractViolation, match="twice"):
        assembler.close_footer()


def test_close_footer_requires_content(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    assembler.open_header("Serialized Form")

    with pytest.raises(ContractViolation, match="close_footer"):
        assembler.close_footer()


def test_attach_after_footer_is_rejected(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    assembler.open_header("Serialized Form")
    assembler.attach_serialized_content(assembler.open_summaries_section())
    assembler.close_footer()

    with pytest.raises(ContractViolation, match="after close_footer"):
        assembler.attach_serialized_content(assembler.open_summaries_section())


def test_hand_off_requires_footer(make_assembler: MakeAssembler, printer: FakePrinter) -> None:
    assembler = make_assembler()
    assembler.open_header("Serialized Form")
    assembler.attach_serialized_content(assembler.open_summaries_section())

    with pytest.raises(ContractViolation, match="close_footer"):
        assembler.hand_off()
    assert printer.printed == []


def test_hand_off_prints_frozen_body_once(
    make_assembler: MakeAssembler, printer: FakePrinter
) -> None:
    assembler = make_assembler()

    body = _finish(assembler)

    assert assembler.state is PageState.FINALIZED
    assert printer.printed == [(body, "Serialized Form")]
    assert body.is_frozen


def test_second_hand_off_fails_without_printing(
    make_assembler: MakeAssembler, printer: FakePrinter
) -> None:
    assembler = make_assembler()
    _finish(assembler)

    with pytest.raises(ContractViolation, match="finalized"):
        assembler.hand_off()
    assert len(printer.printed) == 1


def test_mutators_after_hand_off_fail(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    body = _finish(assembler)

    with pytest.raises(ContractViolation):
        assembler.attach_serialized_content(assembler.open_summaries_section())
    with pytest.raises(ContractViolation):
        assembler.close_footer()
    with pytest.raises(ContractViolation):
        assembler.open_header("Again")
    with pytest.raises(ContractViolation):
        body.append("late")


def test_handed_off_page_rejects_attribute_changes(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    body = _finish(assembler)
    title_div = assembler.content.children[0]
    assert isinstance(title_div, DocumentNode)

    with pytest.raises(ContractViolation):
        body.anchor = "tampered"
    with pytest.raises(ContractViolation):
        title_div.add_style("tampered")
    with pytest.raises(AttributeError):
        title_div.styles.append("tampered")  # type: ignore[attr-defined]

    assert body.anchor is None
    assert title_div.styles == ("header",)


def test_output_failure_is_reported_with_cause(make_assembler: MakeAssembler) -> None:
    error = OSError("disk full")
    assembler = make_assembler(printer=FakePrinter(error=error))

    with pytest.raises(DocumentOutputFailure, match="disk full") as excinfo:
        _finish(assembler)

    assert excinfo.value.cause is error
    assert assembler.state is PageState.FINALIZED


def test_other_printer_errors_propagate_unchanged(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler(printer=FakePrinter(error=KeyError("template")))

    with pytest.raises(KeyError):
        _finish(assembler)


def test_constructors_return_fresh_detached_containers(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()

    summaries = assembler.open_summaries_section()
    classes = assembler.open_class_section()

    assert summaries is not assembler.open_summaries_section()
    assert (summaries.role, summaries.styles) == (Role.LIST, ("blockList",))
    assert (classes.role, classes.styles) == (Role.LIST, ("blockList",))
    assert assembler.open_package_section().role == Role.SECTION
    assert summaries.parent is None
    assert assembler.state is PageState.CREATED


def test_package_heading(make_assembler: MakeAssembler) -> None:
    heading = make_assembler().build_package_heading("com.example.model")

    assert heading.level == 2
    assert heading.text() == "Package com.example.model"


def test_add_package_section_wraps_in_list_item(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    summaries = assembler.open_summaries_section()
    section = assembler.open_package_section()

    assembler.add_package_section(summaries, section)

    (item,) = summaries.children
    assert isinstance(item, DocumentNode)
    assert (item.role, item.styles, item.children) == (Role.LIST_ITEM, ("blockList",), (section,))


def test_serial_uid_through_assembler(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    block = assembler.serial_uid_block()

    assembler.add_serial_uid(block, "serialVersionUID:", "42L")

    assert block.text() == "serialVersionUID:42L"


def test_is_visible_class_usable_in_any_state(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()
    assert assembler.is_visible_class(BASE) is True
    assert assembler.is_visible_class(THROWABLE) is False

    _finish(assembler)

    assert assembler.is_visible_class(BASE) is True


def test_visibility_follows_configuration(make_assembler: MakeAssembler) -> None:
    config = FakeConfiguration()
    assembler = make_assembler(configuration=config)
    assert assembler.is_visible_class(ORDER) is False

    config.include(ORDER)

    assert assembler.is_visible_class(ORDER) is True


def test_delegates_are_scoped_per_class(make_assembler: MakeAssembler) -> None:
    assembler = make_assembler()

    base_fields = assembler.field_writer_for(BASE)
    order_fields = assembler.field_writer_for(ORDER)
    order_methods = assembler.method_writer_for(ORDER)

    assert isinstance(base_fields, SerialFieldWriter)
    assert isinstance(order_methods, SerialMethodWriter)
    assert base_fields is not order_fields
    assert (base_fields.cls, order_fields.cls, order_methods.cls) == (BASE, ORDER, ORDER)


def test_independent_assemblers_do_not_share_bodies(make_assembler: MakeAssembler) -> None:
    first = make_assembler()
    second = make_assembler()

    assert first.open_header("One") is not second.open_header("Two")
    assert first.content.text() == "One"
    assert second.content.text() == "Two"
