"""
Lambda Handler para a API ACABOI
Adapta o FastAPI para AWS Lambda usando Mangum
"""
import os
import sys
import logging

logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Garante que o pacote acaboi seja encontrado no Lambda
current_dir = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.insert(0, current_dir)

from mangum import Mangum
from acaboi.main import app

BASE_PATH = os.environ.get("LAMBDA_BASE_PATH", "")

handler_mangum = Mangum(app, lifespan="auto")


def _strip_base_path(event):
    original_path = event.get('rawPath') or event.get('path') or ''
    if not BASE_PATH or not original_path.startswith(BASE_PATH):
        return
    new_path = original_path[len(BASE_PATH):] or "/"
    if 'rawPath' in event:
        event['rawPath'] = new_path
    if 'path' in event:
        event['path'] = new_path
    if 'requestContext' in event and 'http' in event['requestContext']:
        event['requestContext']['http']['path'] = new_path
    logger.info(f"Path ajustado: {original_path} -> {new_path}")


def handler(event, context):
    """Handler com remoção do prefixo do API Gateway"""
    _strip_base_path(event)
    try:
        response = handler_mangum(event, context)
        logger.info(f"Response status: {response.get('statusCode', 'N/A')}")
        return response
    except Exception as e:
        logger.error(f"Error in handler: {str(e)}", exc_info=True)
        raise
