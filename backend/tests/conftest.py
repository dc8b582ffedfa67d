import os

# Tests run with the ApiKey middleware enabled unless a fixture overrides it
os.environ.pop("APIKEY_AUTH_NO_AUTH", None)
os.environ.pop("APIKEY_AUTH_PUBLIC_PATHS", None)
