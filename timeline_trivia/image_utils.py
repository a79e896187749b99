from urllib.parse import quote

WIKIMEDIA_REDIRECT_URL = (
    "https://commons.wikimedia.org/w/index.php?title=Special:Redirect/file/{file}&width={width}"
)
LOCAL_IMAGE_PREFIX = "images/"
DEFAULT_IMAGE_WIDTH = 300
# Characters encodeURIComponent leaves alone besides letters and digits
URI_COMPONENT_SAFE = "-_.!~*'()"


class ImageUtils:
    def create_wikimedia_image(self, image: str, width: int = DEFAULT_IMAGE_WIDTH) -> str:
        """Build the URL a card image is displayed from

        Args:
            image (str): Image reference stored on the item
            width (int, optional): Thumbnail width in pixels. Defaults to 300.

        Returns:
            str: Site relative path for bundled images, otherwise a Wikimedia Commons redirect URL
        """
        if image.startswith(LOCAL_IMAGE_PREFIX):
            return "/" + image
        return WIKIMEDIA_REDIRECT_URL.format(
            file=quote(image, safe=URI_COMPONENT_SAFE), width=width
        )
