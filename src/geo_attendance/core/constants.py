"""Constants and defaults.

Note: Keep realtime event names and response texts here so the HTTP and
socket layers and their tests agree on them.
"""

# Inbound realtime events
EVENT_REGISTER = "registerEmpId"
EVENT_SEND_LOCATION = "sendLocation"

# Outbound realtime events
EVENT_RECEIVE_LOCATION = "receiveLocation"
EVENT_USER_DISCONNECTED = "userDisconnected"

WELCOME_MESSAGE = "Welcome to the RTA System"

MSG_FIELDS_REQUIRED = "User ID, timestamp, latitude, and longitude are required."
MSG_CHECKIN_OK = "Check-in successful."
MSG_CHECKIN_DUPLICATE = "Check-in already recorded for today."
MSG_CHECKOUT_OK = "Check-out successful."
MSG_CHECKOUT_INVALID = "Check-out not possible or already done for today."
MSG_INTERNAL_ERROR = "Internal Server Error"
