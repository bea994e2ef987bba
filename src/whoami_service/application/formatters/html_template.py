"""Static page template for the HTML view.

The template carries three markers, ``{IP_ADDRESS}``, ``{USER_AGENT}`` and
``{HEADERS}``, each appearing exactly once.
"""

IP_ADDRESS_MARKER = "IP_ADDRESS"
USER_AGENT_MARKER = "USER_AGENT"
HEADERS_MARKER = "HEADERS"

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>WhoAmI - Your Connection Info</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            display: flex;
            justify-content: center;
            align-items: center;
            padding: 20px;
        }
        .container {
            background: white;
            border-radius: 12px;
            box-shadow: 0 20px 60px rgba(0,0,0,0.3);
            max-width: 800px;
            width: 100%;
            padding: 40px;
        }
        h1 {
            color: #333;
            margin-bottom: 10px;
            font-size: 2.5em;
        }
        .subtitle {
            color: #666;
            margin-bottom: 30px;
            font-size: 1.1em;
        }
        .info-card {
            background: #f8f9fa;
            border-left: 4px solid #667eea;
            padding: 20px;
            margin-bottom: 20px;
            border-radius: 4px;
        }
        .info-label {
            color: #667eea;
            font-weight: bold;
            font-size: 0.9em;
            text-transform: uppercase;
            letter-spacing: 1px;
            margin-bottom: 8px;
        }
        .info-value {
            color: #333;
            font-size: 1.2em;
            word-break: break-all;
            font-family: 'Courier New', monospace;
        }
        .headers-section {
            margin-top: 30px;
        }
        .headers-title {
            color: #333;
            font-size: 1.5em;
            margin-bottom: 15px;
            padding-bottom: 10px;
            border-bottom: 2px solid #667eea;
        }
        .header-item {
            background: white;
            padding: 12px;
            margin-bottom: 8px;
            border-radius: 4px;
            border: 1px solid #e0e0e0;
            font-family: 'Courier New', monospace;
            font-size: 0.9em;
        }
        .header-name {
            color: #667eea;
            font-weight: bold;
        }
        .header-value {
            color: #333;
            margin-left: 10px;
        }
        .footer {
            margin-top: 30px;
            padding-top: 20px;
            border-top: 1px solid #e0e0e0;
            text-align: center;
            color: #999;
            font-size: 0.9em;
        }
        .api-links {
            display: flex;
            gap: 10px;
            margin-top: 20px;
            flex-wrap: wrap;
        }
        .api-link {
            background: #667eea;
            color: white;
            padding: 10px 20px;
            border-radius: 6px;
            text-decoration: none;
            font-weight: 500;
            transition: background 0.3s;
        }
        .api-link:hover {
            background: #764ba2;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>&#128269; WhoAmI</h1>
        <p class="subtitle">Your connection information</p>

        <div class="info-card">
            <div class="info-label">IP Address</div>
            <div class="info-value">{IP_ADDRESS}</div>
        </div>

        <div class="info-card">
            <div class="info-label">User Agent</div>
            <div class="info-value">{USER_AGENT}</div>
        </div>

        <div class="headers-section">
            <h2 class="headers-title">Request Headers</h2>
            {HEADERS}
        </div>

        <div class="api-links">
            <a href="/json" class="api-link">JSON API</a>
            <a href="/text" class="api-link">Plain Text</a>
        </div>

        <div class="footer">
            Powered by Starlette + uvicorn | Lightweight HTTP service
        </div>
    </div>
</body>
</html>"""
