PROJECT_NAME = "LE SAGE DEV Booking"
API_V1_STR = "/api/v1"
VERSION = "0.1.0"
