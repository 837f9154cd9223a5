"""URL helpers for Confluence pages."""


def build_page_url(base_url: str, space_key: str, page_id: str) -> str:
    """Build the browser URL of a page.

    Args:
        base_url: Root URL of the Confluence site, without the /wiki suffix
        space_key: Key of the space holding the page
        page_id: ID of the page

    Returns:
        URL in the form <base_url>/wiki/spaces/<space_key>/pages/<page_id>
    """
    return f"{base_url.rstrip('/')}/wiki/spaces/{space_key}/pages/{page_id}"
