"""Walk the raw item stream and stop at the first ERROR or EOF."""

from splitmatter import ItemType, lex

source = '{"title": "Hello", "tags": ["a", "b"]}\n# Hello\n'

for item in lex(source):
    if item.type is ItemType.ERROR:
        raise SystemExit(f"{item.location}: {item.text}")
    if item.type is ItemType.EOF:
        break
    print(item.type.name, item.location, item)
