import os
from nearfood import create_app
from nearfood.config import get_config_class

app = create_app(get_config_class())


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
