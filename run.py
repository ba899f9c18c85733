from newslens import create_app
from config import get_config
import os

config = get_config()

app = create_app(config)

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=config.FLASK_DEBUG)
