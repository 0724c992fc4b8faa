"""Form assembly tests."""

from __future__ import annotations

import logging

import pytest
from metaform_scaffold.form_generation import build_form, generate_forms
from metaform_scaffold.rule_resolution import Operation, RuleSet, parse_rule_set
from metaform_scaffold.schema_management import SchemaError, parse_schema_document


def _document():
    return parse_schema_document(
        {
            "definitions": {
                "Customer": {
                    "required": ["name", "street"],
                    "properties": {
                        "name": {"type": "string", "description": "Name"},
                        "address": {"$ref": "#/definitions/Address"},
                        "billing": {"$ref": "#/definitions/Address"},
                    },
                },
                "Address": {
                    "required": ["street"],
                    "properties": {
                        "street": {"type": "string", "description": "Street"},
                        "city": {"type": "string", "description": "City"},
                    },
                },
            }
        }
    )


def _field_names(generated) -> list[str]:
    return [field["name"] for field in generated.form["sections"][0]["fields"]]


def test_form_document_has_title_fields_and_trailing_submit() -> None:
    generated = build_form(_document(), "Address", Operation.CREATE, RuleSet())

    assert generated.form == {
        "title": "[[forms.addressCreate]]",
        "sections": [
            {
                "fields": [
                    {
                        "name": "street",
                        "type": "text",
                        "title": "[[forms.addressCreate.street]]",
                        "required": True,
                    },
                    {
                        "name": "city",
                        "type": "text",
                        "title": "[[forms.addressCreate.city]]",
                        "required": False,
                    },
                    {"name": "submit", "type": "submit", "text": "[[forms.addressCreate.save]]"},
                ]
            }
        ],
    }
    assert list(generated.locales.items()) == [
        ("forms.addressCreate", "Address"),
        ("forms.addressCreate.street", "Street"),
        ("forms.addressCreate.city", "City"),
        ("forms.addressCreate.save", "Save"),
    ]
    assert generated.form_filename == "address-create.json"
    assert generated.locales_filename == "address-create-locales.json"


def test_prefixed_flatten_produces_dotted_field_names() -> None:
    rule_set = parse_rule_set(
        {"fields": {"billing": {"flatten": True, "prefixFlatProperties": True}}}
    )

    generated = build_form(_document(), "Customer", Operation.UPDATE, rule_set)
    fields = generated.form["sections"][0]["fields"]

    assert _field_names(generated) == ["name", "billing.street", "billing.city", "submit"]
    assert fields[1]["title"] == "[[forms.customerUpdate.billing.street]]"
    assert fields[1]["required"] is False
    assert generated.locales["forms.customerUpdate.billing.city"] == "City"


def test_merged_flatten_checks_required_against_owning_definition() -> None:
    rule_set = parse_rule_set({"fields": {"address": {"flatten": True}}})

    generated = build_form(_document(), "Customer", Operation.CREATE, rule_set)
    fields = {field["name"]: field for field in generated.form["sections"][0]["fields"]}

    assert _field_names(generated) == ["name", "street", "city", "submit"]
    assert fields["street"]["required"] is True
    assert fields["city"]["required"] is False


def test_rules_for_flattened_properties_use_flattened_keys() -> None:
    rule_set = parse_rule_set(
        {
            "fields": {
                "address": {"flatten": True, "prefixFlatProperties": True},
                "address.city": {"skip": True},
            }
        }
    )

    generated = build_form(_document(), "Customer", Operation.CREATE, rule_set)

    assert _field_names(generated) == ["name", "address.street", "submit"]


def test_fields_with_same_camel_cased_name_keep_the_last_property() -> None:
    document = parse_schema_document(
        {
            "definitions": {
                "Item": {
                    "properties": {
                        "item_code": {"type": "string", "description": "first"},
                        "label": {"type": "string"},
                        "itemCode": {"type": "number", "format": "int32", "description": "second"},
                    }
                }
            }
        }
    )

    generated = build_form(document, "Item", Operation.CREATE, RuleSet())
    fields = generated.form["sections"][0]["fields"]

    assert _field_names(generated) == ["itemCode", "label", "submit"]
    assert fields[0]["type"] == "number"
    assert generated.locales["forms.itemCreate.itemCode"] == "second"


def test_build_form_does_not_mutate_schema() -> None:
    document = _document()
    rule_set = parse_rule_set({"fields": {"address": {"flatten": True}}})

    build_form(document, "Customer", Operation.UPDATE, rule_set)

    assert list(document.definitions["Customer"].properties) == ["name", "address", "billing"]


def test_generate_forms_builds_update_then_create_for_each_definition() -> None:
    report = generate_forms(_document(), {"Address": {"skip": True}})

    assert report.succeeded
    assert [(form.definition_name, form.operation) for form in report.forms] == [
        ("Customer", Operation.UPDATE),
        ("Customer", Operation.CREATE),
    ]


def test_generate_forms_applies_prepare_pass_before_operation_rules() -> None:
    rules = {
        "prepare": {"Customer": {"fields": {"address": {"flatten": True}}}},
        "Customer": {"create": {"fields": {"city": {"skip": True}}}},
    }

    report = generate_forms(_document(), rules)
    update, create = report.forms[0], report.forms[1]

    assert _field_names(update) == ["name", "street", "city", "submit"]
    assert _field_names(create) == ["name", "street", "submit"]


def test_generate_forms_isolates_failing_pairs(caplog: pytest.LogCaptureFixture) -> None:
    document = parse_schema_document(
        {
            "definitions": {
                "Broken": {"properties": {"rows": {"type": "array", "items": {"$ref": "Nope"}}}},
                "Fine": {"properties": {"name": {"type": "string"}}},
            }
        }
    )
    rules = {"Broken": {"create": {"fields": {"rows": {"skip": True}}}}}

    with caplog.at_level(logging.WARNING):
        report = generate_forms(document, rules)

    assert [(form.definition_name, form.operation) for form in report.forms] == [
        ("Broken", Operation.CREATE),
        ("Fine", Operation.UPDATE),
        ("Fine", Operation.CREATE),
    ]
    assert len(report.failures) == 1
    failure = report.failures[0]
    assert (failure.definition_name, failure.operation) == ("Broken", Operation.UPDATE)
    assert "Nope" in failure.message
    assert "Could not generate update form for 'Broken'" in caplog.text


def test_unknown_override_type_is_passed_to_the_renderer() -> None:
    rules = {"Address": {"update": {"fields": {"city": {"type": "autocomplete"}}}}}

    report = generate_forms(_document(), rules)

    assert report.succeeded
    update = next(
        form
        for form in report.forms
        if (form.definition_name, form.operation) == ("Address", Operation.UPDATE)
    )
    city = update.form["sections"][0]["fields"][1]
    assert (city["name"], city["type"]) == ("city", "autocomplete")


def test_non_string_override_type_fails_only_that_pair() -> None:
    rules = {"Address": {"update": {"fields": {"city": {"type": ["text"]}}}}}

    report = generate_forms(_document(), rules)

    assert [failure.operation for failure in report.failures] == [Operation.UPDATE]
    assert "Type override must be a string" in report.failures[0].message
    assert len(report.forms) == 3


def test_prepare_failure_aborts_the_run() -> None:
    rules = {"prepare": {"Customer": {"fields": {"address": {"flatten": True}}}}}
    document = parse_schema_document(
        {"definitions": {"Customer": {"properties": {"address": {"$ref": "#/definitions/X"}}}}}
    )

    with pytest.raises(SchemaError, match="Unresolvable reference"):
        generate_forms(document, rules)
