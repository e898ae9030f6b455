import webbrowser
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler
from queue import Empty, Queue
from socketserver import TCPServer
from threading import Thread

from .. import _config


def _make_handler(encoded_page, queue):
    class Handler(BaseHTTPRequestHandler):
        def log_message(self, *args):
            del args

        def do_GET(self):
            if not self.path.endswith("index.html"):
                # The browser can also ask for favicon.ico and the like.
                self.send_error(HTTPStatus.NOT_FOUND, "File not found")
                return
            self.send_response(HTTPStatus.OK)
            self.send_header("Content-type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(encoded_page)))
            self.end_headers()
            self.wfile.write(encoded_page)
            queue.put("done")

    return Handler


def open_in_browser(page, timeout=None):
    """Display an HTML page (given as a string) in a web browser.

    The page is served once by a local HTTP server running in a separate
    thread; the server shuts down as soon as the browser has fetched it, so
    reloading the page in the browser fails. Nothing is written to disk.

    Parameters
    ----------
    page : str
        The HTML page.
    timeout : float, default=None
        Seconds to wait for the browser's request. Defaults to the
        ``browser_timeout`` configuration.

    Raises
    ------
    RuntimeError
        If the browser has not fetched the page before the timeout.
    """
    if timeout is None:
        timeout = _config.get_config()["browser_timeout"]
    queue = Queue()

    # Port 0: the OS picks a free port.
    server = TCPServer(("", 0), _make_handler(page.encode("UTF-8"), queue))
    _, port = server.server_address

    server_thread = Thread(target=server.serve_forever, daemon=True)
    server_thread.start()

    try:
        webbrowser.open(f"http://localhost:{port}/index.html")
        queue.get(timeout=timeout)
    except Empty:
        raise RuntimeError("Failed to open the table in a web browser.")
    finally:
        server.shutdown()
        server_thread.join()
        server.server_close()
