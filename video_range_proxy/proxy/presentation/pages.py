"""
Index page rendering.
"""

from ...core.config import PageConfig


def render_index_page(page_config: PageConfig, video_src: str = "/video") -> str:
    """Render the static player page pointing at the proxy's video route"""
    attributes = [
        f'src="{video_src}"',
        f'width="{page_config.width}"',
        f'height="{page_config.height}"',
    ]
    if page_config.controls:
        attributes.append("controls")
    if page_config.autoplay:
        attributes.append("autoplay")
    attributes.append('crossorigin="anonymous"')
    if page_config.playsinline:
        attributes.extend(['playsinline=""', 'webkit-playsinline=""'])

    video_attributes = "\n\t\t\t\t".join(attributes)

    return f"""<html>
	<head></head>
	<body>
		<video {video_attributes}
		>
		</video>
	</body>
</html>
"""
