from .cli import CLI


CLI().run()
