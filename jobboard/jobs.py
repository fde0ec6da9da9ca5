import logging

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from jobboard.repositories import JobRepository, SortOrder, UserRepository
from jobboard.schemas import JobIn
from jobboard.utils import login_required

logger = logging.getLogger(__name__)

jobs_bp = Blueprint('jobs', __name__)


def _jobs() -> JobRepository:
    return current_app.extensions['job_repository']


def _users() -> UserRepository:
    return current_app.extensions['user_repository']


def _job_from_form() -> JobIn:
    return JobIn(
        title=request.form.get('title'),
        company=request.form.get('company'),
        type=request.form.get('type'),
        experience_level=request.form.get('experience_level'),
        salary=request.form.get('salary'),
    )


def _not_found(job_id):
    return render_template('view_job.html', job=None, job_id=job_id), 404


@jobs_bp.get('/jobs')
def list_jobs():
    try:
        jobs = _jobs().get_all()
        return render_template('jobs.html', jobs=jobs, order=None)
    except Exception:
        logger.exception("Error fetching jobs")
        return 'Failed to fetch jobs', 500


@jobs_bp.get('/jobs/sort')
def sort_jobs():
    order = SortOrder.parse(request.args.get('order'))
    try:
        jobs = _jobs().get_all_sorted_by_salary(order)
        return render_template('jobs.html', jobs=jobs, order=order.value)
    except Exception:
        logger.exception("Error fetching jobs sorted by salary (%s)", order.value)
        return 'Failed to fetch jobs', 500


@jobs_bp.get('/jobs/new')
@login_required
def add_job():
    return render_template('add_job.html')


@jobs_bp.post('/jobs')
@login_required
def create_job():
    try:
        job_id = _jobs().create(_job_from_form())
        logger.info("Created job %s", job_id)
        return redirect(url_for('jobs.manage_jobs'))
    except Exception:
        logger.exception("Error adding job")
        return 'Error adding job', 500


@jobs_bp.get('/jobs/<job_id>')
@login_required
def view_job(job_id: str):
    try:
        job = _jobs().get_by_id(job_id)
        if job is None:
            return _not_found(job_id)
        return render_template('view_job.html', job=job)
    except Exception:
        logger.exception("Error fetching job details for %s", job_id)
        return 'An error occurred while fetching the job details.', 500


@jobs_bp.get('/jobs/<job_id>/edit')
@login_required
def edit_job(job_id: str):
    try:
        job = _jobs().get_by_id(job_id)
        if job is None:
            return _not_found(job_id)
        return render_template('edit_job.html', job=job)
    except Exception:
        logger.exception("Error fetching job %s for edit", job_id)
        return 'Error fetching job details', 500


@jobs_bp.route('/jobs/<job_id>', methods=['POST', 'PUT'])
@login_required
def update_job(job_id: str):
    try:
        _jobs().update(job_id, _job_from_form())
        logger.info("Updated job %s", job_id)
        return redirect(url_for('jobs.manage_jobs'))
    except Exception:
        logger.exception("Error updating job %s", job_id)
        return 'Error updating job', 500


@jobs_bp.get('/jobs/<job_id>/delete')
@login_required
def confirm_delete_job(job_id: str):
    try:
        job = _jobs().get_by_id(job_id)
        if job is None:
            return _not_found(job_id)
        return render_template('delete_job.html', job=job)
    except Exception:
        logger.exception("Error fetching job %s for delete", job_id)
        return 'Error fetching job details', 500


@jobs_bp.delete('/jobs/<job_id>')
@jobs_bp.post('/jobs/<job_id>/delete')
@login_required
def delete_job(job_id: str):
    try:
        _jobs().delete(job_id)
        logger.info("Deleted job %s", job_id)
        return redirect(url_for('jobs.manage_jobs'))
    except Exception:
        logger.exception("Error deleting job %s", job_id)
        return 'Error deleting job', 500


@jobs_bp.get('/manage-jobs')
@login_required
def manage_jobs():
    try:
        users = _users().get_all()
        jobs = _jobs().get_all()
        return render_template('manage_jobs.html', users=users, jobs=jobs)
    except Exception:
        logger.exception("Error fetching jobs and users")
        return 'Error fetching jobs and users', 500
