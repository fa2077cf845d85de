from fastapi import FastAPI, Response
from fastapi.responses import HTMLResponse
from kungfu import Error, Ok
from pydantic import BaseModel

from hx import Swap, event
from hx import response as R
from hx.request import HTMX, HTMXMiddleware


class Flash(BaseModel):
    level: str
    text: str


app = FastAPI()
app.add_middleware(HTMXMiddleware)


@app.post("/items", response_class=HTMLResponse)
async def add_item(response: Response, htmx: HTMX) -> str:
    if not htmx.is_htmx_request:
        return "<p>Item added. <a href='/items'>Back</a></p>"

    match R.set_headers(
        response,
        R.trigger("itemAdded"),
        R.trigger_with_detail(event("flash", Flash(level="info", text="Saved"))),
        R.trigger_after_swap("focusInput"),
        R.reswap(Swap.BEFORE_END),
    ):
        case Ok(_):
            return "<li>New item</li>"
        case Error(e):
            return f"<li>Could not set headers: {e}</li>"


@app.delete("/items/{item_id}", response_class=HTMLResponse)
async def delete_item(item_id: int, response: Response) -> str:
    R.set_headers(response, R.reswap(Swap.DELETE), R.trigger("itemRemoved"))
    return ""


# Run yourself with uvicorn: uvicorn examples.fastapi_app:app
