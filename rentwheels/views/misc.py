from aiohttp import web

from rentwheels.version import name


async def index(request):
    """Lets a load balancer or a curious human know the server is up."""
    return web.Response(text=f"{name} is running.")
