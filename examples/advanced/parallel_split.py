"""Scanners share no state: split 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from splitmatter import split

docs = [f"---\nid: {i}\n---\nContent for document {i}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(split, docs))

print(f"Split {len(results)} documents in parallel")
print("First frontmatter:", results[0].frontmatter_text)
print("Last frontmatter:", results[-1].frontmatter_text)
