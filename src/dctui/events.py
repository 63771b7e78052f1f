"""Backend event codes and their human-readable names."""

from __future__ import annotations

DC_EVENT_INFO = 100
DC_EVENT_SMTP_CONNECTED = 101
DC_EVENT_IMAP_CONNECTED = 102
DC_EVENT_SMTP_MESSAGE_SENT = 103
DC_EVENT_WARNING = 300
DC_EVENT_ERROR = 400
DC_EVENT_ERROR_NETWORK = 401
DC_EVENT_ERROR_SELF_NOT_IN_GROUP = 410
DC_EVENT_MSGS_CHANGED = 2000
DC_EVENT_INCOMING_MSG = 2005
DC_EVENT_MSG_DELIVERED = 2010
DC_EVENT_MSG_FAILED = 2012
DC_EVENT_MSG_READ = 2015
DC_EVENT_CHAT_MODIFIED = 2020
DC_EVENT_CONTACTS_CHANGED = 2030
DC_EVENT_LOCATION_CHANGED = 2035
DC_EVENT_CONFIGURE_PROGRESS = 2041
DC_EVENT_IMEX_PROGRESS = 2051
DC_EVENT_IMEX_FILE_WRITTEN = 2052
DC_EVENT_SECUREJOIN_INVITER_PROGRESS = 2060
DC_EVENT_SECUREJOIN_JOINER_PROGRESS = 2061

UNKNOWN_EVENT = "<unknown-event>"

EVENTS: dict[int, str] = {
    DC_EVENT_INFO: "DC_EVENT_INFO",
    DC_EVENT_SMTP_CONNECTED: "DC_EVENT_SMTP_CONNECTED",
    DC_EVENT_IMAP_CONNECTED: "DC_EVENT_IMAP_CONNECTED",
    DC_EVENT_SMTP_MESSAGE_SENT: "DC_EVENT_SMTP_MESSAGE_SENT",
    DC_EVENT_WARNING: "DC_EVENT_WARNING",
    DC_EVENT_ERROR: "DC_EVENT_ERROR",
    DC_EVENT_ERROR_NETWORK: "DC_EVENT_ERROR_NETWORK",
    DC_EVENT_ERROR_SELF_NOT_IN_GROUP: "DC_EVENT_ERROR_SELF_NOT_IN_GROUP",
    DC_EVENT_MSGS_CHANGED: "DC_EVENT_MSGS_CHANGED",
    DC_EVENT_INCOMING_MSG: "DC_EVENT_INCOMING_MSG",
    DC_EVENT_MSG_DELIVERED: "DC_EVENT_MSG_DELIVERED",
    DC_EVENT_MSG_FAILED: "DC_EVENT_MSG_FAILED",
    DC_EVENT_MSG_READ: "DC_EVENT_MSG_READ",
    DC_EVENT_CHAT_MODIFIED: "DC_EVENT_CHAT_MODIFIED",
    DC_EVENT_CONTACTS_CHANGED: "DC_EVENT_CONTACTS_CHANGED",
    DC_EVENT_LOCATION_CHANGED: "DC_EVENT_LOCATION_CHANGED",
    DC_EVENT_CONFIGURE_PROGRESS: "DC_EVENT_CONFIGURE_PROGRESS",
    DC_EVENT_IMEX_PROGRESS: "DC_EVENT_IMEX_PROGRESS",
    DC_EVENT_IMEX_FILE_WRITTEN: "DC_EVENT_IMEX_FILE_WRITTEN",
    DC_EVENT_SECUREJOIN_INVITER_PROGRESS: "DC_EVENT_SECUREJOIN_INVITER_PROGRESS",
    DC_EVENT_SECUREJOIN_JOINER_PROGRESS: "DC_EVENT_SECUREJOIN_JOINER_PROGRESS",
}

# Events that carry a (chat_id, msg_id) pair worth showing in a chat page
MESSAGE_EVENTS = frozenset({DC_EVENT_INCOMING_MSG, DC_EVENT_MSGS_CHANGED})
# Events whose text payload is also surfaced on the status page
STATUS_EVENTS = frozenset({DC_EVENT_INFO, DC_EVENT_WARNING, DC_EVENT_ERROR})


def event_name(event: int) -> str:
    """Return the name registered for *event*, or ``UNKNOWN_EVENT``."""
    return EVENTS.get(event, UNKNOWN_EVENT)
