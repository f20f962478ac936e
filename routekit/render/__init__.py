"""Renderers that write response bodies in JSON, XML, YAML, TOML, MessagePack and more."""

__all__ = [
    "base",
    "data",
    "htmlrender",
    "jsonrender",
    "msgpackrender",
    "protobufrender",
    "reader",
    "redirect",
    "text",
    "tomlrender",
    "xmlrender",
    "yamlrender",
]