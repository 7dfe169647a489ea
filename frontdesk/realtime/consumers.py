import json
from channels.generic.websocket import AsyncWebsocketConsumer

STATS_GROUP = "updates"


class UpdatesConsumer(AsyncWebsocketConsumer):
    """Pushes dashboard statistics refreshed by ``manage.py poll_stats``."""
    GROUP = STATS_GROUP

    async def connect(self):
        await self.channel_layer.group_add(self.GROUP, self.channel_name)
        await self.accept()
        await self.send(json.dumps({"type": "welcome", "message": "connected"}))

    async def disconnect(self, close_code):
        await self.channel_layer.group_discard(self.GROUP, self.channel_name)

    async def stats_refresh(self, event):
        # event: {"type": "stats.refresh", "ts": "...", "data": {...}}
        await self.send(json.dumps(event))
