from queue import Queue
from flask import Flask, Response, jsonify, render_template, request
from common import CellState, UIMessageType
from common.broadcaster import StatusBroadcaster
from display import Display
from providers.patterns import PATTERNS
import logging

logger = logging.getLogger(__name__)


class Server:
    def __init__(
            self, ui_queue: Queue, state_broadcaster: StatusBroadcaster,
            display: Display, host: str = '0.0.0.0', port: int = 5000):
        self.app = Flask(__name__)
        self.ui_queue = ui_queue
        self.state_broadcaster = state_broadcaster
        self.display = display
        self.host = host
        self.port = port
        # Register routes
        self.app.route('/')(self.index)
        self.app.route('/state')(self.state_route)
        self.app.route('/frame.png')(self.frame_route)
        self.app.route('/set/cell')(self.set_cell_route)
        self.app.route('/set/autoplay')(self.set_autoplay_route)
        self.app.route('/set/pattern')(self.set_pattern_route)
        self.app.route('/trigger/toggle')(self.trigger_toggle_route)
        self.app.route('/trigger/next')(self.trigger_next_route)
        self.app.route('/trigger/play')(self.trigger_play_route)
        self.app.route('/trigger/clear')(self.trigger_clear_route)
        self.app.route('/trigger/random')(self.trigger_random_route)

    def index(self):
        state = self.state_broadcaster.get_status()
        return render_template(
            'index.html', state=state, patterns=sorted(PATTERNS))

    def state_route(self):
        return jsonify(self.state_broadcaster.get_status())

    def frame_route(self):
        png = self.display.latest_frame_png()
        if png is None:
            return 'No frame rendered yet', 404
        return Response(png, mimetype='image/png')

    def set_cell_route(self):
        coords = self._coords()
        if coords is None:
            return 'Cell coordinates not provided', 400
        value = request.args.get('state')
        try:
            state = CellState(int(value))
        except (TypeError, ValueError):
            return f'Invalid state: {value}', 400
        x, y = coords
        self.ui_queue.put(
            {"type": UIMessageType.SET_CELL, "x": x, "y": y, "state": state})
        return f'Cell ({x}, {y}) set to {state.name}', 200

    def trigger_toggle_route(self):
        coords = self._coords()
        if coords is None:
            return 'Cell coordinates not provided', 400
        x, y = coords
        self.ui_queue.put({"type": UIMessageType.TOGGLE_CELL, "x": x, "y": y})
        return f'Cell ({x}, {y}) toggled', 200

    def set_autoplay_route(self):
        value = request.args.get('enabled')
        if value not in ('0', '1'):
            return f'Invalid autoplay value: {value}', 400
        enabled = value == '1'
        self.ui_queue.put(
            {"type": UIMessageType.SET_AUTOPLAY, "enabled": enabled})
        return f'Autoplay {"enabled" if enabled else "disabled"}', 200

    def set_pattern_route(self):
        name = request.args.get('name')
        if name is None:
            return 'Pattern not provided', 400
        if name not in PATTERNS:
            return f'Invalid pattern: {name}', 400
        self.ui_queue.put({"type": UIMessageType.LOAD_PATTERN, "name": name})
        return f'Pattern set to {name}', 200

    def trigger_next_route(self):
        self.ui_queue.put({"type": UIMessageType.NEXT})
        return 'Next generation triggered', 200

    def trigger_play_route(self):
        self.ui_queue.put({"type": UIMessageType.PLAY})
        return 'Play triggered', 200

    def trigger_clear_route(self):
        self.ui_queue.put({"type": UIMessageType.CLEAR})
        return 'Clear triggered', 200

    def trigger_random_route(self):
        self.ui_queue.put({"type": UIMessageType.LOAD_RANDOM})
        return 'Random seed triggered', 200

    def _coords(self):
        try:
            return int(request.args['x']), int(request.args['y'])
        except (KeyError, ValueError):
            return None

    def web_server_task(self):
        logger.info(f"Web server listening on {self.host}:{self.port}")
        self.app.run(host=self.host, port=self.port,
                     debug=False, use_reloader=False)
