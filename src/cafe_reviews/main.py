"""Main entry point for the cafe reviews application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from cafe_reviews.coordinators import ReviewsCoordinator
from cafe_reviews.io import ReviewLoader, ReviewStore
from cafe_reviews.services import GeminiTranslationProvider, SettingsManager, configure_logging
from cafe_reviews.ui import MainWindow

logger = logging.getLogger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    configure_logging(settings.get_log_level())

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Cafe Reviews")
    app.setOrganizationName("CafeReviews")

    # 3. Initialize Infrastructure
    api_key = settings.get_gemini_api_key()
    provider = None
    if api_key:
        provider = GeminiTranslationProvider(api_key=api_key, model_name=settings.get_gemini_model())
    else:
        logger.warning("GEMINI_API_KEY is not set; translation is disabled")

    store = ReviewStore()
    loader = ReviewLoader()

    # 4. Construct UI
    main_window = MainWindow()
    main_window.set_store(store)

    # 5. Instantiate Coordinator (Dependency Injection) and wire signals
    coordinator = ReviewsCoordinator(
        store=store,
        loader=loader,
        provider=provider,
        reviews_file=settings.get_reviews_file(),
    )
    main_window.set_coordinator(coordinator)

    # 6. Load data and show UI
    coordinator.load_reviews()
    coordinator.prepare_supported_languages()
    main_window.show()

    if provider is None:
        main_window.show_error(
            "Translation Disabled",
            "API key not configured. Add GEMINI_API_KEY to .env file.",
        )

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
