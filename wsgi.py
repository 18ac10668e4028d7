import logging
import os
from app import create_app

logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)

config_name = os.getenv('FLASK_ENV', 'development')
app = create_app(config_name)

if __name__ == '__main__':
    # Get port from environment
    port = int(os.getenv('PORT', 5000))
    
    # CRITICAL: Never run debug mode in production
    debug_mode = os.getenv('FLASK_DEBUG', 'False').lower() in ('true', '1', 'yes')
    
    # threaded=True: the translation queue serializes provider calls across request threads
    app.run(host='0.0.0.0', port=port, debug=debug_mode, threaded=True)
