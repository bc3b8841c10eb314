"""Split frontmatter from content in 3 lines."""

from splitmatter import split

doc = split("+++\ntitle = 'Hello'\n+++\n# Hello\n")
print(doc.format, doc.frontmatter_text)
print(doc.content_text)
