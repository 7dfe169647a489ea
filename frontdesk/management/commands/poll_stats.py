import signal

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import close_old_connections
from django.utils import timezone

from frontdesk.realtime.consumers import STATS_GROUP
from frontdesk.services.polling import ScheduledRefresh
from frontdesk.services.stats import refresh_cached_stats


class Command(BaseCommand):
    help = "Refresh dashboard statistics on a fixed interval and broadcast them over WebSocket."

    def add_arguments(self, parser):
        parser.add_argument('--interval', type=float, default=None,
                            help='Seconds between refreshes (default: HMS_STATS_POLL_SECONDS).')
        parser.add_argument('--once', action='store_true', help='Refresh a single time and exit.')

    def refresh(self):
        payload = refresh_cached_stats(timeout=self.interval * 2)
        channel_layer = get_channel_layer()
        if channel_layer is not None:
            event = {"type": "stats.refresh", "ts": timezone.now().isoformat(), "data": payload['data']}
            async_to_sync(channel_layer.group_send)(STATS_GROUP, event)
        return payload

    def refresh_in_thread(self):
        # worker thread owns its own connection
        close_old_connections()
        try:
            return self.refresh()
        finally:
            close_old_connections()

    def handle(self, *args, **options):
        self.interval = options['interval'] or settings.HMS_STATS_POLL_SECONDS
        if options['once']:
            poller = ScheduledRefresh(self.interval, self.refresh, name='stats-refresh')
            payload = poller.tick()
            if poller.last_error is not None:
                raise poller.last_error
            self.stdout.write(self.style.SUCCESS(f"Refreshed statistics: {payload['data']}"))
            return

        poller = ScheduledRefresh(self.interval, self.refresh_in_thread, name='stats-refresh')

        def _stop(signum, frame):
            poller.stop(timeout=self.interval)

        signal.signal(signal.SIGTERM, _stop)
        poller.start()
        self.stdout.write(self.style.SUCCESS(f"Polling statistics every {self.interval}s (Ctrl+C to stop)"))
        try:
            while not poller.wait(1):
                pass
        except KeyboardInterrupt:
            poller.stop(timeout=self.interval)
        self.stdout.write(self.style.SUCCESS(f"Stopped after {poller.ticks} refreshes"))
