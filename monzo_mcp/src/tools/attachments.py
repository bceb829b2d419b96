"""Attachment tools.

Attaching an image is a three step flow: request an upload URL, upload the
file there yourself, then register the resulting file_url against a
transaction.
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.responses import log_tool_call, run_tool


def register_attachment_tools(server: FastMCP, client: MonzoClient) -> None:
    """Register the upload, register and deregister attachment tools."""

    @server.tool(
        name="monzo_upload_attachment",
        title="Upload Attachment",
        description=(
            "Get a pre-signed upload URL for attaching an image to a Monzo transaction. "
            "Returns the upload URL and file URL to use with monzo_register_attachment."
        ),
        structured_output=False,
    )
    async def upload_attachment(
        file_name: Annotated[str, Field(description="The name of the file (e.g. 'receipt.png')")],
        file_type: Annotated[
            str, Field(description="The MIME type of the file (e.g. 'image/png', 'image/jpeg')")
        ],
        content_length: Annotated[int, Field(gt=0, description="The file size in bytes")],
    ) -> CallToolResult:
        log_tool_call("monzo_upload_attachment", {"file_name": file_name, "file_type": file_type})
        form = {
            "file_name": file_name,
            "file_type": file_type,
            "content_length": str(content_length),
        }
        return await run_tool(
            "monzo_upload_attachment", client.post_form("/attachment/upload", form)
        )

    @server.tool(
        name="monzo_register_attachment",
        title="Register Attachment",
        description=(
            "Register an uploaded image as an attachment on a Monzo transaction. The image "
            "must already be uploaded to the URL from monzo_upload_attachment."
        ),
        structured_output=False,
    )
    async def register_attachment(
        external_id: Annotated[str, Field(description="The transaction ID to attach the image to")],
        file_url: Annotated[
            str, Field(description="The file_url returned from monzo_upload_attachment")
        ],
        file_type: Annotated[
            str, Field(description="The MIME type of the file (e.g. 'image/png')")
        ],
    ) -> CallToolResult:
        log_tool_call("monzo_register_attachment", {"external_id": external_id})
        form = {"external_id": external_id, "file_url": file_url, "file_type": file_type}
        return await run_tool(
            "monzo_register_attachment", client.post_form("/attachment/register", form)
        )

    @server.tool(
        name="monzo_deregister_attachment",
        title="Deregister Attachment",
        description="Remove an attachment from a Monzo transaction.",
        structured_output=False,
    )
    async def deregister_attachment(
        id: Annotated[str, Field(description="The attachment ID to remove")],  # noqa: A002
    ) -> CallToolResult:
        log_tool_call("monzo_deregister_attachment", {"id": id})
        return await run_tool(
            "monzo_deregister_attachment",
            client.post_form("/attachment/deregister", {"id": id}),
        )
