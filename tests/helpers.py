"""Helpers for building YouTube API responses and errors in tests."""

import json
from typing import Dict, List, Optional
from unittest.mock import MagicMock

import httplib2
from googleapiclient.errors import HttpError


def make_http_error(
    status: int, message: Optional[str] = None, reason: Optional[str] = None
) -> HttpError:
    """Build an HttpError shaped like a YouTube Data API error response."""
    if message is None:
        content = b""
    else:
        error = {"code": status, "message": message}
        if reason:
            error["errors"] = [{"message": message, "domain": "youtube", "reason": reason}]
        content = json.dumps({"error": error}).encode("utf-8")
    return HttpError(httplib2.Response({"status": status}), content)


def playlist_item(video_id: Optional[str], title: str = "", channel: str = "Channel") -> Dict:
    """Build a playlistItems.list entry."""
    resource = {"kind": "youtube#video"}
    if video_id:
        resource["videoId"] = video_id
    return {
        "id": f"item-{video_id}",
        "snippet": {
            "title": title or f"Video {video_id}",
            "videoOwnerChannelTitle": channel,
            "resourceId": resource,
        },
    }


def fail_inserts(client: MagicMock, failures: Dict[str, Exception]) -> None:
    """Make playlistItems.insert fail for the given video IDs.

    Args:
        client: Mock YouTube API client
        failures: Mapping of video ID to the exception its insert raises
    """

    def insert(part, body):
        video_id = body["snippet"]["resourceId"]["videoId"]
        request = MagicMock()
        if video_id in failures:
            request.execute.side_effect = failures[video_id]
        else:
            request.execute.return_value = {"id": f"added-{video_id}"}
        return request

    client.playlistItems.return_value.insert.side_effect = insert


def inserted_video_ids(client: MagicMock) -> List[str]:
    """Video IDs passed to playlistItems.insert, in call order."""
    return [
        c.kwargs["body"]["snippet"]["resourceId"]["videoId"]
        for c in client.playlistItems.return_value.insert.call_args_list
    ]
