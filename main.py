from config_utils import load_config
from gui_utils import FlashcardGUI
from log_utils import configure_logging
from sample_deck import build_controller


def main():
    config = load_config()
    configure_logging(config.log_level, config.log_format)
    controller = build_controller(config)
    gui = FlashcardGUI(controller, config)
    gui.run()

if __name__ == "__main__":
    main()
