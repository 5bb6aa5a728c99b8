"""Mappings of Office Open XML markup shared by all document kinds."""