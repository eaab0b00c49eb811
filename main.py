"""
Main entry point for Dessert Clicker.
"""

import sys
import atexit
from typing import Optional
from utils.logger import logger, ScreenLogAdapter
from utils.config_loader import get_config_value
from utils.display import (
    DisplaySurface, OpenCVWindow,
    EVENT_TAP, EVENT_SHARE, EVENT_ROTATE, EVENT_HOME, EVENT_QUIT,
)
from clicker.catalog import Catalog, load_catalog
from clicker.session import SessionState, new_session, record_sale, tier_changed
from clicker.snapshot import write_bundle, read_bundle
from clicker.share import ShareUnavailableError, share_score

SHARE_MENU_ITEM = "share"

class DessertClickerApp:
    """
    The clicker screen.

    Lifecycle callbacks only log and dispatch into the session functions;
    all score state lives in ``self.state``.
    """

    def __init__(self, display: DisplaySurface, catalog: Catalog = None, screen_id: int = 1):
        self.display = display
        self.catalog = catalog if catalog is not None else load_catalog()
        self.state: Optional[SessionState] = None
        self.logger = ScreenLogAdapter(logger, {"screen_id": screen_id})

    # --- Lifecycle ---
    def on_create(self, saved_state: Optional[dict] = None):
        self.logger.debug("onCreate called")

        if saved_state is not None:
            self.state = read_bundle(saved_state, self.catalog)
        else:
            self.state = new_session(self.catalog)

        self.display.set_score(self.state.revenue, self.state.units_sold)
        self.display.set_image(self.state.current.image_id)

    def on_start(self):
        self.logger.debug("onStart called")

    def on_restart(self):
        self.logger.debug("onRestart called")

    def on_resume(self):
        self.logger.debug("onResume called")

    def on_pause(self):
        self.logger.debug("onPause called")

    def on_stop(self):
        self.logger.debug("onStop called")

    def on_destroy(self):
        self.logger.debug("onDestroy called")

    def on_save_instance_state(self, out_state: dict):
        self.logger.debug("onSaveInstance Called")
        write_bundle(out_state, self.state)

    # --- Input ---
    def on_dessert_clicked(self):
        """Update the score and show the next dessert if one was unlocked."""
        before = self.state
        self.state = record_sale(before, self.catalog)

        self.display.set_score(self.state.revenue, self.state.units_sold)
        if tier_changed(before, self.state):
            self.logger.info(f"Now producing {self.state.current.image_id} (${self.state.current.price})")
            self.display.set_image(self.state.current.image_id)

    def on_options_item_selected(self, item_id: str) -> bool:
        if item_id == SHARE_MENU_ITEM:
            self.on_share()
            return True
        return False

    def on_share(self):
        try:
            share_score(self.state.units_sold, self.state.revenue)
        except ShareUnavailableError as e:
            self.logger.warning(f"Share failed: {e}")
            self.display.show_notice(get_config_value("share.not_available", "Sharing Not Available"))

class ClickerHost:
    """Drives the screen through its lifecycle and feeds it window events."""

    def __init__(self, display: DisplaySurface = None, catalog: Catalog = None):
        # None until run() builds them from settings
        self.display = display
        self.catalog = catalog
        self.app: Optional[DessertClickerApp] = None
        self.screens_created = 0
        atexit.register(self.shutdown)

    def launch(self, saved_state: Optional[dict] = None) -> DessertClickerApp:
        self.screens_created += 1
        self.app = DessertClickerApp(self.display, self.catalog, screen_id=self.screens_created)
        self.app.on_create(saved_state)
        self.app.on_start()
        self.app.on_resume()
        return self.app

    def teardown(self) -> dict:
        """Stop and destroy the screen, returning its saved instance state."""
        out_state = {}
        self.app.on_pause()
        self.app.on_stop()
        self.app.on_save_instance_state(out_state)
        self.app.on_destroy()
        return out_state

    def recreate(self) -> DessertClickerApp:
        """Configuration change: a new screen is built from the old one's bundle."""
        logger.info("Recreating screen")
        return self.launch(self.teardown())

    def background_and_return(self):
        self.app.on_pause()
        self.app.on_stop()
        self.app.on_restart()
        self.app.on_start()
        self.app.on_resume()

    def dispatch(self, event: str) -> bool:
        """Handle one window event. False means the host should exit."""
        if event == EVENT_TAP:
            self.app.on_dessert_clicked()
        elif event == EVENT_SHARE:
            self.app.on_options_item_selected(SHARE_MENU_ITEM)
        elif event == EVENT_ROTATE:
            self.recreate()
        elif event == EVENT_HOME:
            self.background_and_return()
        elif event == EVENT_QUIT:
            return False
        return True

    def shutdown(self):
        if self.app is None or self.app.state is None:
            return
        state = self.app.state
        unlocked = self.catalog.index(state.current) + 1

        logger.info("=" * 40)
        logger.info(f"{'SESSION REPORT':^40}")
        logger.info("=" * 40)
        logger.info(f"{'Desserts sold':<20} | {state.units_sold}")
        logger.info(f"{'Revenue':<20} | ${state.revenue}")
        logger.info(f"{'Desserts unlocked':<20} | {unlocked}/{len(self.catalog)}")
        logger.info(f"{'Current dessert':<20} | {state.current.image_id}")
        logger.info("=" * 40)
        self.app = None

    def run(self) -> int:
        try:
            if self.catalog is None:
                self.catalog = load_catalog()
            if self.display is None:
                self.display = OpenCVWindow()
            self.display.open()
            self.launch()
            logger.info("Click the dessert to sell it. Keys: s=share, r=rotate, h=home, q=quit")

            running = True
            while running:
                for event in self.display.poll_events():
                    if not self.dispatch(event):
                        running = False
                        break

            self.app.on_pause()
            self.app.on_stop()
            self.app.on_destroy()
            return 0

        except KeyboardInterrupt:
            logger.info("User interrupted execution.")
            return 0
        except Exception as e:
            logger.error(f"Fatal error: {e}", exc_info=True)
            return 1
        finally:
            if self.display is not None:
                self.display.close()

def main():
    host = ClickerHost()
    sys.exit(host.run())

if __name__ == "__main__":
    main()
