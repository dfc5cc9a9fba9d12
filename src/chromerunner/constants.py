"""Constants shared by the launcher and the hosted page."""

# Logged by the hosted page when its window closes.
WINDOW_CLOSE_SENTINEL = "CHROMERUNNER:WINDOWCLOSE"

# Chrome writes console messages to stderr as:
#   [pid:tid:timestamp:INFO:CONSOLE(1)] "message", source: file:///.../main.js (1)
LOG_START_MARKER = '] "'
LOG_END_MARKER = '", source: '

DEFAULT_WINDOW_SIZE = "800,600"

INDEX_FILENAME = "index.html"
SCRIPT_FILENAME = "main.js"
PROFILE_DIRNAME = "chromedata"
STAGING_PREFIX = "chromerunner"
STAGING_SUFFIX = "app"

DEFAULT_HTML_TEMPLATE = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <title>App</title>
    <meta charset="utf-8"/>
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body>

    <style>
        html, body {{
            padding: 0px;
            margin: 0px;
            cursor: default;
            user-select: none;
        }}
    </style>

    <script>
        (function() {{
            var sentinel = "{WINDOW_CLOSE_SENTINEL}"
            var reported = false
            function reportClose() {{
                if (reported) return
                reported = true
                console.log(sentinel)
            }}
            window.addEventListener("unload", reportClose)
            var originalWindowClose = window.close
            window.close = function() {{
                reportClose()
                originalWindowClose.call(window)
            }}
        }})()
    </script>

    <script src="{SCRIPT_FILENAME}"></script>

</body>
</html>
"""
