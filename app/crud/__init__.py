from app.crud.employee import employee
from app.crud.salary_period import salary_period
from app.crud.costs import task_cost, cost_summary
from app.crud.revenue import revenue
from app.crud.user import user
