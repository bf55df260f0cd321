import datetime
import io
import json
from dataclasses import dataclass

import pytest
import yaml

from eksnode.printers import (
    JSONPrinter,
    TablePrinter,
    YAMLPrinter,
    new_printer,
)

ZERO_TIME = datetime.datetime(1, 1, 1, tzinfo=datetime.timezone.utc)


def make_cluster(name, arn):
    return {
        "Name": name,
        "Status": "ACTIVE",
        "Arn": arn,
        "CreatedAt": ZERO_TIME,
        "ResourcesVpcConfig": {"VpcId": "vpc-1234", "SubnetIds": ["sub1", "sub2"]},
    }


def expected_cluster(name, arn):
    return {
        "Name": name,
        "Status": "ACTIVE",
        "Arn": arn,
        "CreatedAt": "0001-01-01T00:00:00Z",
        "ResourcesVpcConfig": {"VpcId": "vpc-1234", "SubnetIds": ["sub1", "sub2"]},
    }


TWO = [make_cluster("test-cluster-1", "arn-12345678"), make_cluster("test-cluster-2", "arn-87654321")]
TWO_EXPECTED = [
    expected_cluster("test-cluster-1", "arn-12345678"),
    expected_cluster("test-cluster-2", "arn-87654321"),
]


def render(printer, obj, kind="clusters"):
    out = io.StringIO()
    printer.print_obj_with_kind(kind, obj, out)
    return out.getvalue()


def table_printer():
    printer = TablePrinter()
    printer.add_column("NAME", lambda c: c["Name"])
    printer.add_column("ARN", lambda c: c["Arn"])
    return printer


@pytest.mark.parametrize(
    "name,cls", [("json", JSONPrinter), ("yaml", YAMLPrinter), ("table", TablePrinter)]
)
def test_new_printer_types(name, cls):
    assert type(new_printer(name)) is cls


def test_new_printer_unknown():
    with pytest.raises(ValueError, match="unknown output printer type: xml"):
        new_printer("xml")


def test_json_single_cluster():
    output = render(JSONPrinter(), [make_cluster("test-cluster", "arn-12345678")])
    assert json.loads(output) == [expected_cluster("test-cluster", "arn-12345678")]


def test_json_two_clusters():
    assert json.loads(render(JSONPrinter(), TWO)) == TWO_EXPECTED


def test_json_indents_by_four_spaces():
    assert render(JSONPrinter(), {"a": 1}) == '{\n    "a": 1\n}'


def test_json_dataclass():
    @dataclass
    class Item:
        name: str
        size: int

    assert json.loads(render(JSONPrinter(), [Item("x", 3)])) == [{"name": "x", "size": 3}]


def test_json_unserialisable_raises():
    with pytest.raises(TypeError):
        render(JSONPrinter(), [object()])


def test_yaml_single_cluster():
    output = render(YAMLPrinter(), [make_cluster("test-cluster", "arn-12345678")])
    assert yaml.safe_load(output) == [expected_cluster("test-cluster", "arn-12345678")]


def test_yaml_two_clusters():
    assert yaml.safe_load(render(YAMLPrinter(), TWO)) == TWO_EXPECTED


def test_yaml_sorts_keys():
    assert render(YAMLPrinter(), {"b": 1, "a": [1, 2]}) == "a:\n- 1\n- 2\nb: 1\n"


def test_table_rejects_non_slice():
    with pytest.raises(TypeError, match="expects a slice"):
        render(table_printer(), make_cluster("test-cluster", "arn-12345678"))


def test_table_empty_slice():
    assert render(table_printer(), []) == "No clusters found\n"


def test_table_empty_default_kind():
    out = io.StringIO()
    table_printer().print_obj([], out)
    assert out.getvalue() == "No objects found\n"


def test_table_single_cluster():
    output = render(table_printer(), [make_cluster("test-cluster", "arn-12345678")])
    assert output == "NAME\t\tARN\ntest-cluster\tarn-12345678\n"


def test_table_two_clusters():
    assert render(table_printer(), TWO) == (
        "NAME\t\tARN\ntest-cluster-1\tarn-12345678\ntest-cluster-2\tarn-87654321\n"
    )


def test_log_obj_passes_rendered_text():
    calls = []
    JSONPrinter().log_obj(lambda fmt, arg: calls.append((fmt, arg)), "clusters: %s", {"a": "50%"})
    assert calls == [("clusters: %s", '{\n    "a": "50%"\n}')]


def test_log_obj_table_error_propagates():
    with pytest.raises(TypeError):
        table_printer().log_obj(lambda *a: None, "%s", {"not": "a list"})