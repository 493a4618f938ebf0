"""Reusable components built lazily with assemble().

Each component declares its tag and default attributes on the class and
fills its content the first time it is rendered or mutated. DeferredText
reads the cart late, so the badge shows the count at render time.
"""

from marcado import BaseHtmlElement, DeferredText, HtmlElement, RenderConfig, render_config_context

cart: list[str] = []


class NavBar(BaseHtmlElement):
    tag = "nav"
    default_attributes = {"class": "navbar", "role": "navigation"}

    def __init__(self, links: dict[str, str]) -> None:
        super().__init__()
        self.links = links

    def assemble(self) -> None:
        for label, href in self.links.items():
            self.add(HtmlElement("a", {"href": href}, label))

        badge = HtmlElement("span", {"class": "badge"}, DeferredText(lambda: str(len(cart))))
        self.add(badge)


nav = NavBar({"Home": "/", "Shop": "/shop?sort=price&dir=asc"})
nav.get_attributes().add("class", "sticky")

cart.extend(["apple", "pear"])

with render_config_context(RenderConfig(separator="")):
    print(nav.render())
