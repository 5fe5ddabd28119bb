"""Dashboard page and the JSON endpoints it drives."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from birthday_admin.services.dashboard import DashboardSession  # noqa: TC001
from birthday_admin.services.photos import UploadedPhoto

if TYPE_CHECKING:
    from birthday_admin.containers import AppContainer

router = APIRouter(tags=["dashboard"])


class FieldValue(BaseModel):
    """Body for single-field draft updates."""

    value: str


def _get_session(request: Request) -> DashboardSession:
    container: AppContainer = request.app.state.container
    return container.dashboard


@router.get("/", response_class=HTMLResponse)
async def dashboard_ui() -> HTMLResponse:
    """Dashboard page that renders the session state from the JSON API."""
    return HTMLResponse(_DASHBOARD_HTML)


@router.get("/api/state")
async def get_state(
    session: DashboardSession = Depends(_get_session),
) -> dict[str, object]:
    """Return the dashboard state, loading the records on first use."""
    await session.ensure_loaded()
    return session.snapshot()


@router.post("/api/refresh")
async def refresh(
    session: DashboardSession = Depends(_get_session),
) -> dict[str, object]:
    """Reload the record list from the backend."""
    await session.record_store.refresh()
    return session.snapshot()


@router.put("/api/draft/fields/{name}")
async def set_draft_field(
    name: str,
    body: FieldValue,
    session: DashboardSession = Depends(_get_session),
) -> dict[str, object]:
    """Update one draft field."""
    try:
        session.drafts.set_field(name, body.value)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
    return session.snapshot()


@router.put("/api/draft/photo")
async def set_draft_photo(
    request: Request,
    session: DashboardSession = Depends(_get_session),
) -> dict[str, object]:
    """Use the raw request body as the selected photo file."""
    content = await request.body()
    if content:
        await session.drafts.set_photo_from_file(
            UploadedPhoto(
                content=content, content_type=request.headers.get("content-type")
            )
        )
    return session.snapshot()


@router.put("/api/draft/photo-url")
async def set_draft_photo_url(
    body: FieldValue,
    session: DashboardSession = Depends(_get_session),
) -> dict[str, object]:
    """Use a typed URL as the draft photo."""
    session.drafts.set_photo_from_url(body.value)
    return session.snapshot()


@router.post("/api/draft/submit")
async def submit_draft(
    session: DashboardSession = Depends(_get_session),
) -> dict[str, object]:
    """Create a birthday from the draft and return the refreshed state."""
    missing = session.drafts.draft.missing_required()
    if missing:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"missing_fields": missing},
        )
    await session.drafts.submit()
    await session.record_store.settle()
    return session.snapshot()


@router.delete("/api/birthdays/{birthday_id}")
async def delete_birthday(
    birthday_id: str,
    session: DashboardSession = Depends(_get_session),
) -> dict[str, object]:
    """Delete a birthday and return the refreshed state."""
    await session.deletions.delete(birthday_id)
    await session.record_store.settle()
    return session.snapshot()


@router.post("/api/notification/dismiss")
async def dismiss_notification(
    session: DashboardSession = Depends(_get_session),
) -> dict[str, object]:
    """Hide the current notification."""
    session.notifications.dismiss()
    return session.snapshot()


_DASHBOARD_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Birthday Admin Dashboard</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      form { max-width: 720px; margin-bottom: 2rem; }
      .row { margin-bottom: 1rem; }
      input, select { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      #preview img { max-height: 200px; max-width: 100%; border-radius: 8px; }
      #cards { display: flex; flex-wrap: wrap; gap: 1rem; }
      .card { width: 260px; border: 1px solid #ddd; border-radius: 8px; }
      .card img { width: 100%; height: 250px; object-fit: cover; }
      .card .body { padding: 0.75rem; }
      #notice { position: fixed; right: 1rem; bottom: 1rem; padding: 0.8rem; }
      #notice.success { background: #e6f4ea; }
      #notice.error { background: #fdecea; }
    </style>
  </head>
  <body>
    <h1>Birthday Admin Dashboard</h1>
    <form id="draft-form">
      <h2>Add New Birthday</h2>
      <div class="row">
        <label>Name</label><br />
        <input name="name" required />
      </div>
      <div class="row">
        <label>Class</label><br />
        <select name="class" required></select>
      </div>
      <div class="row">
        <label>Section</label><br />
        <select name="section" required></select>
      </div>
      <div class="row">
        <label>Hall Ticket Number</label><br />
        <input name="hallTicketNumber" required />
      </div>
      <div class="row">
        <label>Upload Photo</label><br />
        <input id="photo-file" type="file" accept="image/*" />
        <div id="preview"></div>
      </div>
      <div class="row">
        <label>Or enter image URL</label><br />
        <input id="photo-url" name="photo" />
      </div>
      <div class="row">
        <label>Birth Date</label><br />
        <input name="birthDate" type="date" required />
      </div>
      <button type="submit">Add Birthday</button>
    </form>
    <h2>Birthday Records</h2>
    <div id="cards">Loading birthdays...</div>
    <div id="notice" hidden>
      <span id="notice-text"></span>
      <button type="button" onclick="dismissNotice()">Close</button>
    </div>
    <script>
      const form = document.getElementById('draft-form');
      let dismissTimer = null;
      let queue = Promise.resolve();

      function call(method, path, body, contentType) {
        queue = queue
          .catch(() => undefined)
          .then(() => send(method, path, body, contentType));
        return queue;
      }

      async function send(method, path, body, contentType) {
        const options = { method: method, headers: {} };
        if (body !== undefined) {
          options.body = body;
          options.headers['Content-Type'] = contentType || 'application/json';
        }
        const res = await fetch(path, options);
        if (res.ok) {
          render(await res.json());
        } else {
          showError(res.status, await res.json().catch(() => ({})));
        }
        return res;
      }

      function showError(statusCode, payload) {
        const detail = payload.detail || {};
        const notice = document.getElementById('notice');
        notice.className = 'error';
        document.getElementById('notice-text').textContent = detail.missing_fields
          ? 'Missing fields: ' + detail.missing_fields.join(', ')
          : 'Request failed: ' + statusCode;
        notice.hidden = false;
      }

      function fillOptions(select, labels) {
        if (select.options.length) {
          return;
        }
        select.appendChild(new Option('', ''));
        labels.forEach((label) => select.appendChild(new Option(label, label)));
      }

      function render(state) {
        fillOptions(form.elements['class'], state.classes);
        fillOptions(form.elements['section'], state.sections);
        Object.entries(state.draft).forEach(([name, value]) => {
          const field = form.elements[name];
          if (field && field !== document.activeElement) {
            field.value = value;
          }
        });
        const preview = document.getElementById('preview');
        preview.replaceChildren();
        if (state.preview) {
          const img = document.createElement('img');
          img.src = state.preview;
          img.alt = 'Preview';
          preview.appendChild(img);
        }
        const cards = document.getElementById('cards');
        cards.replaceChildren();
        if (state.loading) {
          cards.textContent = 'Loading birthdays...';
        } else {
          state.records.forEach((record) => cards.appendChild(card(record)));
        }
        const notice = document.getElementById('notice');
        clearTimeout(dismissTimer);
        if (state.notification) {
          notice.className = state.notification.severity;
          document.getElementById('notice-text').textContent =
            state.notification.message;
          notice.hidden = false;
          dismissTimer = setTimeout(
            () => call('GET', '/api/state'),
            state.notification_timeout_ms + 50
          );
        } else {
          notice.hidden = true;
        }
      }

      function card(record) {
        const root = document.createElement('div');
        root.className = 'card';
        const img = document.createElement('img');
        img.src = record.display_photo;
        img.alt = record.name || '';
        const body = document.createElement('div');
        body.className = 'body';
        const lines = [
          record.name || '',
          record.class_and_section,
          record.hallTicketNumber || '',
          record.birthDate ? new Date(record.birthDate).toLocaleDateString() : '',
        ];
        lines.forEach((text) => {
          const line = document.createElement('div');
          line.textContent = text;
          body.appendChild(line);
        });
        const remove = document.createElement('button');
        remove.type = 'button';
        remove.textContent = 'Delete';
        remove.onclick = () =>
          call('DELETE', '/api/birthdays/' + encodeURIComponent(record._id));
        body.appendChild(remove);
        root.append(img, body);
        return root;
      }

      function dismissNotice() {
        call('POST', '/api/notification/dismiss');
      }

      form.addEventListener('change', (event) => {
        const field = event.target;
        if (field.id === 'photo-file') {
          const file = field.files[0];
          if (file) {
            call('PUT', '/api/draft/photo', file, file.type || 'image/jpeg');
          }
          field.value = '';
          return;
        }
        if (field.id === 'photo-url') {
          call('PUT', '/api/draft/photo-url', JSON.stringify({ value: field.value }));
          return;
        }
        if (field.name) {
          call(
            'PUT',
            '/api/draft/fields/' + field.name,
            JSON.stringify({ value: field.value })
          );
        }
      });

      form.addEventListener('submit', (event) => {
        event.preventDefault();
        call('POST', '/api/draft/submit');
      });

      call('GET', '/api/state');
    </script>
  </body>
</html>
"""
