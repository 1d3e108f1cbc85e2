#!/usr/bin/env python3
import logging
import os


logging.basicConfig(
    level=os.environ.get('SWPT_SAVE_LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
)
log = logging.getLogger('swpt_save')
