"""Open Graph properties of a page."""

from __future__ import annotations

from attrs import define, field

from ..hid import hid
from ..utils import has_value
from .elements import add_meta
from .types import ImageList, MetaList


@define(slots=True)
class OpenGraphImage:
    """Image shown when the page is shared.

    Attributes:
        url: URL of the image. Images without a URL are never emitted.
        width: Width in pixels, emitted only when positive.
        height: Height in pixels, emitted only when positive.
    """

    url: str | None = None
    width: int | None = None
    height: int | None = None


@define(slots=True)
class OpenGraphProperties:
    """Open Graph properties of a page.

    Attributes:
        title: Title of the page as shown when shared.
        description: Short description of the page.
        site_name: Name of the site the page belongs to.
        url: Canonical URL of the page.
        images: Ordered collection of images.
    """

    title: str | None = None
    description: str | None = None
    site_name: str | None = None
    url: str | None = None
    images: ImageList = field(factory=list)

    def append_image(
        self, url: str | None, width: int = 0, height: int = 0
    ) -> None:
        """Append an image unless ``url`` is blank.

        Args:
            url: URL of the image.
            width: Width of the image in pixels.
            height: Height of the image in pixels.
        """

        if not has_value(url):
            return
        self.images.append(OpenGraphImage(url, width, height))

    def append_images(self, *urls: str) -> None:
        """Append an image for each of ``urls``."""

        self.images.extend(OpenGraphImage(url) for url in urls)

    def get_meta_tags(self) -> MetaList:
        """Return the ``<meta>`` elements describing these properties.

        Returns:
            ``og:title``, ``og:description``, ``og:site_name`` and ``og:url``
            for the properties that have a value, followed by ``og:image``
            and its dimensions for each image with a URL.
        """

        tags: MetaList = []

        if has_value(self.title):
            add_meta(tags, property="og:title", content=self.title)
        if has_value(self.description):
            add_meta(tags, property="og:description", content=self.description)
        if has_value(self.site_name):
            add_meta(tags, property="og:site_name", content=self.site_name)
        if has_value(self.url):
            add_meta(tags, property="og:url", content=self.url)

        # Images are numbered from one, counting only those with a URL, so
        # each position keeps its hid across renders.
        i = 1
        for image in self.images:
            if not has_value(image.url):
                continue

            add_meta(
                tags,
                property="og:image",
                content=image.url,
                hid=hid(f"og:image:{i:03d}"),
            )
            if image.width and image.width > 0:
                add_meta(
                    tags,
                    property="og:image:width",
                    content=str(image.width),
                    hid=hid(f"og:image:width:{i:03d}"),
                )
            # The height shares its hid key with the width; consumers match
            # elements on these values.
            if image.height and image.height > 0:
                add_meta(
                    tags,
                    property="og:image:height",
                    content=str(image.height),
                    hid=hid(f"og:image:width:{i:03d}"),
                )

            i += 1

        return tags
