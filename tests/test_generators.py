import re

from common.dom import TextElement, XmlElement
from generators.comment_generator import CommentGeneratorConfig, DefaultCommentGenerator
from generators.factory import create_sql_map_generator
from generators.generator import SqlMapGenerator, MYBATIS3_MAPPER_PUBLIC_ID
from generators.introspected_table import IntrospectedTable, to_camel_case
from plugins.base import PluginAdapter


class VetoPlugin(PluginAdapter):
    def validate(self, warnings):
        return True

    def sql_map_document_generated(self, document, introspected_table):
        return False


class MarkerPlugin(PluginAdapter):
    calls = 0

    def validate(self, warnings):
        return True

    def sql_map_document_generated(self, document, introspected_table):
        MarkerPlugin.calls += 1
        document.root_element.add_element(XmlElement(self.properties.get("tag", "marker")))
        return True


def test_to_camel_case():
    assert to_camel_case("users") == "Users"
    assert to_camel_case("user_roles") == "UserRoles"
    assert to_camel_case("order-items_v2") == "OrderItemsV2"


def test_introspected_table_names():
    table = IntrospectedTable("user_roles", target_package="com.example.mapper")
    assert table.domain_object_name == "UserRoles"
    assert table.mapper_name == "UserRolesMapper"
    assert table.namespace == "com.example.mapper.UserRolesMapper"


def test_introspected_table_explicit_namespace_and_properties():
    table = IntrospectedTable("t", namespace="a.B", properties={"cache_size": "1"})
    assert table.namespace == "a.B"
    assert table.get_table_configuration_property("cache_size") == "1"
    assert table.get_table_configuration_property("cache_type") is None


def test_comment_generator_adds_marker_lines():
    generator = DefaultCommentGenerator(CommentGeneratorConfig(suppress_date=True))
    element = XmlElement("cache")
    element.add_element(TextElement("existing"))
    generator.add_comment(element)
    contents = [e.content for e in element.elements]
    assert contents[0] == "<!--"
    assert "  WARNING - @mbg.generated" in contents
    assert contents[-2] == "-->"
    assert contents[-1] == "existing"
    assert not any("generated on" in c for c in contents)


def test_comment_generator_includes_date_unless_suppressed():
    generator = DefaultCommentGenerator(CommentGeneratorConfig(date_format="%Y-%m-%d"))
    element = XmlElement("cache")
    generator.add_comment(element)
    dated = [e.content for e in element.elements if "generated on" in e.content]
    assert len(dated) == 1
    assert re.search(r"\d{4}-\d{2}-\d{2}", dated[0])


def test_comment_generator_suppress_all():
    generator = DefaultCommentGenerator(CommentGeneratorConfig(suppress_all_comments=True))
    element = XmlElement("cache")
    generator.add_comment(element)
    assert element.elements == []


def test_sql_map_generator_builds_mapper_skeleton():
    document = SqlMapGenerator().generate(IntrospectedTable("users", target_package="com.example"))
    assert document.public_id == MYBATIS3_MAPPER_PUBLIC_ID
    assert document.root_element.name == "mapper"
    assert document.root_element.get_attribute("namespace") == "com.example.UsersMapper"
    assert document.root_element.elements == []


def test_plugin_veto_stops_chain_and_drops_document():
    MarkerPlugin.calls = 0
    generator = SqlMapGenerator(plugins=[VetoPlugin(), MarkerPlugin()])
    assert generator.generate(IntrospectedTable("users")) is None
    assert MarkerPlugin.calls == 0


def test_plugins_run_in_order():
    generator = SqlMapGenerator(plugins=[
        MarkerPlugin(properties={"tag": "first"}),
        MarkerPlugin(properties={"tag": "second"}),
    ])
    document = generator.generate(IntrospectedTable("users"))
    assert [e.name for e in document.root_element.elements] == ["first", "second"]


def test_factory_builds_generator_with_cache_plugin():
    generator = create_sql_map_generator(
        [{"type": "plugins.cache_plugin:CachePlugin", "properties": {"cache_eviction": "LRU"}}],
        CommentGeneratorConfig(suppress_all_comments=True),
    )
    document = generator.generate(IntrospectedTable("users"))
    assert [e.name for e in document.root_element.elements] == ["cache"]
    assert '<cache eviction="LRU"/>' in document.get_formatted_content()


def test_introspected_table_stringifies_property_values():
    table = IntrospectedTable("t", properties={"cache_size": 512, "cache_readOnly": True, "cache_type": None})
    assert table.get_table_configuration_property("cache_size") == "512"
    assert table.get_table_configuration_property("cache_readOnly") == "true"
    assert table.get_table_configuration_property("cache_type") == ""


def test_plugin_adapter_stringifies_property_values():
    plugin = MarkerPlugin(properties={"tag": 7, "flag": False})
    assert plugin.properties == {"tag": "7", "flag": "false"}
