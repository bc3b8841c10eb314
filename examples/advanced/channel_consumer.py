"""Scan on a producer thread and consume items as they arrive."""

from splitmatter import ItemChannel, ItemType

source = b"---\ntitle: Streaming\n---\nBody produced on another thread\n"

with ItemChannel(source, source_file="stream.md") as channel:
    for item in channel:
        if item.type is ItemType.ERROR:
            raise SystemExit(str(item))
        print(item.type.name, item)
