"""FastAPI application exposing the entry store and the entry codecs."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from . import config
from .codecs import CODECS, EntryCodec, get_codec, load_entry_schema
from .core import (
    Address,
    CodecError,
    CodecIOError,
    DecodeError,
    EncodeError,
    Entry,
    MalformedInputError,
    Person,
    sort_by_id,
    sort_by_last_name,
)
from .logging_setup import configure_logging
from .services import EntryStore, NextEntryId

logger = configure_logging().getChild("api")

app = FastAPI(title="Address Book Service")

entry_store = EntryStore(
    uri=config.MONGODB_URI,
    database=config.MONGODB_DATABASE,
    collection=config.MONGODB_COLLECTION,
)

# Loaded once; a missing or broken schema stops the service at import time.
entry_schema = load_entry_schema()
codecs: dict[str, EntryCodec] = {
    name: get_codec(name, schema=entry_schema) for name in CODECS
}
next_entry_id = NextEntryId()

_ERROR_STATUS: dict[type[CodecError], int] = {
    MalformedInputError: 400,
    EncodeError: 400,
    DecodeError: 422,
    CodecIOError: 500,
}


class NewEntry(BaseModel):
    """Entry payload without an id; the service assigns one."""

    person: Person
    address: Address
    notes: str | None = None


class CodecResult(BaseModel):
    codec: str
    path: str
    count: int


@app.exception_handler(CodecError)
async def codec_error_handler(request: Request, exc: CodecError) -> JSONResponse:
    status_code = _ERROR_STATUS.get(type(exc), 500)
    logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "message": str(exc)},
    )


@app.on_event("startup")
async def on_startup() -> None:
    global next_entry_id
    await entry_store.connect()
    next_entry_id = await NextEntryId.load(entry_store)
    logger.info("Address book service ready with codecs: %s", ", ".join(codecs))


def _codec(name: str) -> EntryCodec:
    codec = codecs.get(name)
    if codec is None:
        raise HTTPException(status_code=404, detail=f"Unknown codec {name!r}")
    return codec


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "service": "addressbook", "codecs": sorted(codecs)}


@app.get("/entries", response_model=list[Entry])
async def list_entries(sort: Literal["id", "lastName"] = "id") -> list[Entry]:
    entries = await entry_store.find_all()
    if sort == "lastName":
        return sort_by_last_name(entries)
    return sort_by_id(entries)


@app.get("/entries/{entry_id}", response_model=Entry)
async def get_entry(entry_id: int) -> Entry:
    entry = await entry_store.find_by_id(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Entry {entry_id} not found")
    return entry


@app.post("/entries", response_model=Entry, status_code=201)
async def create_entry(payload: NewEntry) -> Entry:
    entry = Entry(
        entry_id=await next_entry_id.next(),
        person=payload.person,
        address=payload.address,
        notes=payload.notes,
    )
    await entry_store.insert(entry)
    return entry


@app.delete("/entries/{entry_id}", status_code=204)
async def delete_entry(entry_id: int) -> None:
    if not await entry_store.delete(entry_id):
        raise HTTPException(status_code=404, detail=f"Entry {entry_id} not found")


@app.post("/export/{codec_name}", response_model=CodecResult)
async def export_entries(codec_name: str) -> CodecResult:
    codec = _codec(codec_name)
    entries = sort_by_id(await entry_store.find_all())
    path = codec.default_output_file
    await run_in_threadpool(codec.write_entries, entries, path)
    return CodecResult(codec=codec.name, path=str(path), count=len(entries))


@app.post("/import/{codec_name}", response_model=CodecResult)
async def import_entries(codec_name: str) -> CodecResult:
    codec = _codec(codec_name)
    path = codec.default_input_file
    if not path.exists():
        path = codec.default_output_file
    if not path.exists():
        raise HTTPException(status_code=404, detail=f"No {codec.name} file to import")
    entries = await run_in_threadpool(codec.read_entries, path)
    count = await entry_store.replace_all(entries)
    for entry in entries:
        next_entry_id.observe(entry.entry_id)
    return CodecResult(codec=codec.name, path=str(path), count=count)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=config.LOG_LEVEL.lower())
