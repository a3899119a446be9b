"""FastAPI dependencies"""

from fastapi import Request

from frontdesk.services import Frontdesk


def get_frontdesk(request: Request) -> Frontdesk:
    """The managers created at startup"""
    return request.app.state.frontdesk
