"""Top-level document shape shared by validation and the passes."""

# Required top-level fields and their JSON primitive type.
REQUIRED_FIELDS = {
    "v": "string",   # format version
    "fr": "number",  # frame rate
    "ip": "number",  # in-point
    "op": "number",  # out-point
    "w": "number",   # width
    "h": "number",   # height
}
