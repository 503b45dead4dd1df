import textwrap

import pytest

from codegen.config_loader import ConfigLoader


def write_config(tmp_path, content):
    path = tmp_path / "generator.yaml"
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader(str(tmp_path / "missing.yaml"))


def test_load_full_config(tmp_path):
    path = write_config(tmp_path, """
        context:
          id: main
          target_package: com.example.mapper
          comment_generator:
            suppress_date: true
        plugins:
          - type: cache
            properties:
              cache_eviction: LRU
              cache_size: 100
              cache_readOnly: true
        tables:
          - name: users
            properties:
              cache_size: "512"
              cache_type:
          - name: orders
            domain_object_name: Order
            namespace: com.example.custom.OrderMapper
        run:
          output_dir: out
          overwrite: true
    """)
    config = ConfigLoader(str(path)).load()

    assert config.context.id == "main"
    assert config.context.target_package == "com.example.mapper"
    assert config.context.comment_generator.suppress_date is True
    assert config.context.comment_generator.suppress_all_comments is False

    assert len(config.plugins) == 1
    assert config.plugins[0].type == "cache"
    assert config.plugins[0].properties == {
        "cache_eviction": "LRU",
        "cache_size": "100",
        "cache_readOnly": "true",
    }

    users, orders = config.tables
    assert users.properties == {"cache_size": "512", "cache_type": ""}
    assert orders.domain_object_name == "Order"
    assert orders.namespace == "com.example.custom.OrderMapper"
    assert orders.properties == {}

    assert config.run.output_dir == "out"
    assert config.run.overwrite is True
    assert config.run.log_level == "INFO"


def test_defaults_when_optional_sections_missing(tmp_path):
    path = write_config(tmp_path, """
        tables:
          - name: users
    """)
    config = ConfigLoader(str(path)).load()
    assert config.context.id == "default"
    assert config.context.target_package == ""
    assert config.plugins == []
    assert config.run.overwrite is False


def test_missing_tables_raises(tmp_path):
    path = write_config(tmp_path, """
        plugins:
          - type: cache
    """)
    with pytest.raises(ValueError, match="tables"):
        ConfigLoader(str(path)).load()


def test_table_without_name_raises(tmp_path):
    path = write_config(tmp_path, """
        tables:
          - namespace: a.B
    """)
    with pytest.raises(ValueError, match="name"):
        ConfigLoader(str(path)).load()


def test_duplicate_table_raises(tmp_path):
    path = write_config(tmp_path, """
        tables:
          - name: users
          - name: users
    """)
    with pytest.raises(ValueError, match="Duplicate"):
        ConfigLoader(str(path)).load()


def test_plugin_without_type_raises(tmp_path):
    path = write_config(tmp_path, """
        plugins:
          - properties: {}
        tables:
          - name: users
    """)
    with pytest.raises(ValueError, match="type"):
        ConfigLoader(str(path)).load()


def test_environment_references_are_resolved(tmp_path, monkeypatch):
    monkeypatch.setenv("MAPPER_CACHE_TYPE", "org.example.RedisCache")
    monkeypatch.delenv("MAPPER_UNSET_VAR", raising=False)
    path = write_config(tmp_path, """
        plugins:
          - type: cache
            properties:
              cache_type: ${MAPPER_CACHE_TYPE}
              cache_eviction: ${MAPPER_UNSET_VAR}
        tables:
          - name: users
    """)
    config = ConfigLoader(str(path)).load()
    assert config.plugins[0].properties["cache_type"] == "org.example.RedisCache"
    assert config.plugins[0].properties["cache_eviction"] == "${MAPPER_UNSET_VAR}"
