# jetpackatc/radio/dispatcher.py
"""
Random radio traffic. Picks one airborne agent per call and issues a
weather-appropriate instruction through the gateway.
"""
import logging
import random
import time
from typing import Any, Dict, List, Optional

from ..utils.geometry import Point, clamp
from .constants import InstructionKind, RadioConstants
from .core import InstructionGateway
from .exceptions import InstructionRejectedError

logger = logging.getLogger(__name__)

class RadioDispatcher:
    def __init__(self, gateway: InstructionGateway, weather, edge_margin: float = 0.0,
                 rng: Optional[random.Random] = None):
        self.gateway = gateway
        self.weather = weather
        self.edge_margin = edge_margin
        self.rng = rng or random.Random()

    def _regime(self):
        state = self.weather.current
        if state.severity >= RadioConstants.SEVERE_WEATHER_SEVERITY:
            return "severe", RadioConstants.SEVERE_WEATHER_MIX
        if not state.safe_to_fly:
            return "caution", RadioConstants.CAUTION_MIX
        return "routine", RadioConstants.ROUTINE_MIX

    def _pick_kind(self, mix) -> InstructionKind:
        roll = self.rng.randrange(100)
        for threshold, kind in mix:
            if roll < threshold:
                return kind
        return mix[-1][1]

    def _offset_point(self, origin: Point, offset: float) -> Point:
        m = self.edge_margin
        return Point(clamp(origin.x + self.rng.uniform(-offset, offset), m, self.gateway.width - m - 1),
                     clamp(origin.y + self.rng.uniform(-offset, offset), m, self.gateway.height - m - 1))

    def dispatch(self, agents: List) -> Optional[Dict[str, Any]]:
        """
        Issues one instruction. Returns a standardized response, or None when
        every agent is parked. Rejections come back as success=False; they are
        never raised.
        """
        airborne = [a for a in agents if not a.is_parked]
        if not airborne:
            return None

        agent = self.rng.choice(airborne)
        regime, mix = self._regime()
        kind = self._pick_kind(mix)

        try:
            message = self._issue(agent, kind, regime)
        except InstructionRejectedError as e:
            logger.info(f"Radio to {agent.callsign} ({kind.value}) rejected: {e.reason}")
            return self._format_response(False, str(e), agent, kind)

        logger.info(f"Radio to {agent.callsign}: {message}")
        return self._format_response(True, message, agent, kind)

    def _issue(self, agent, kind: InstructionKind, regime: str) -> str:
        if kind is InstructionKind.EMERGENCY_LANDING:
            self.gateway.issue_emergency_landing(agent.agent_id, "Severe weather")
            return "Land immediately at nearest parking"

        if kind in RadioConstants.LATERAL_OFFSETS:
            point = self._offset_point(agent.position, RadioConstants.LATERAL_OFFSETS[kind])
            text = {
                InstructionKind.WEATHER_DETOUR: "Alter course to avoid storm",
                InstructionKind.COURSE_ADJUSTMENT: "Detour for safety",
                InstructionKind.TRAFFIC_SEPARATION: "Traffic alert - change course",
            }[kind]
            self.gateway.set_radio_destination(agent.agent_id, point, text)
            return f"{text}, proceed to ({point.x:.0f}, {point.y:.0f})"

        if kind is InstructionKind.ALTITUDE_CHANGE:
            low, high = RadioConstants.ALTITUDE_BANDS[regime]
            altitude = round(self.rng.uniform(low, high))
            self.gateway.set_radio_altitude(agent.agent_id, altitude, "Cleared to new altitude")
            return f"Cleared to new altitude {altitude}"

        if kind in (InstructionKind.RETURN_TO_DESTINATION, InstructionKind.DIRECT_ROUTING):
            text = "Return to destination" if kind is InstructionKind.RETURN_TO_DESTINATION else "Direct route cleared"
            self.gateway.set_radio_destination(agent.agent_id, agent.destination, text)
            return text

        if kind is InstructionKind.POSITION_REPORT:
            return f"Report position: ({agent.position.x:.0f}, {agent.position.y:.0f}) at {agent.altitude:.0f}"

        state = self.weather.current
        return (f"Weather update: {state.condition}, wind {state.wind_speed_mph} mph, "
                f"visibility {state.visibility_miles} miles")

    def _format_response(self, success: bool, message: str, agent, kind: InstructionKind) -> Dict[str, Any]:
        return {
            "module": "radio",
            "success": success,
            "message": message,
            "data": {
                "agent_id": agent.agent_id,
                "callsign": agent.callsign,
                "instruction": kind.value,
            },
            "timestamp": time.time()
        }
