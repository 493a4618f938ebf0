"""Build and render an element tree in 3 lines — zero config, zero deps."""

from marcado import tag

html = tag("p", {"class": "greeting"}, ["Hello", tag("strong", content="<World>")])
print(html.render())
