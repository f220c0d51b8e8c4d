from viewer.views.assets import create_templates as create_templates
from viewer.views.compare_handlers import compare_api as compare_api
from viewer.views.compare_handlers import compare_page as compare_page
from viewer.views.compare_handlers import seeds_page as seeds_page
