from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# --- Models ---
class Player(db.Model):
    player_id = db.Column(db.Integer, primary_key=True)
    player_name = db.Column(db.String(100))
    number = db.Column(db.Integer)
    team_name = db.Column(db.String(100))
    position = db.Column(db.String(50))
    age = db.Column(db.String(10))  # free-form, e.g. "27"
    height = db.Column(db.String(10))  # free-form, e.g. "175cm"

    def to_dict(self):
        return {
            'player_id': self.player_id,
            'player_name': self.player_name,
            'number': self.number,
            'team_name': self.team_name,
            'position': self.position,
            'age': self.age,
            'height': self.height,
        }

    def __repr__(self): return f'<Player {self.player_name} (#{self.number} - {self.team_name})>'

class Statistic(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    player_name = db.Column(db.String(100))
    total_points = db.Column(db.Integer, default=0)
    attack_points = db.Column(db.Integer, default=0)
    block_points = db.Column(db.Integer, default=0)
    serve_points = db.Column(db.Integer, default=0)
    efficiency = db.Column(db.Float, default=0.0)

    def to_dict(self):
        return {
            'id': self.id,
            'player_name': self.player_name,
            'total_points': self.total_points,
            'attack_points': self.attack_points,
            'block_points': self.block_points,
            'serve_points': self.serve_points,
            'efficiency': self.efficiency,
        }

    def __repr__(self): return f'<Statistic {self.player_name}: {self.total_points} pts ({self.efficiency}%)>'

class Team(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    team_name = db.Column(db.String(100))
    location = db.Column(db.String(100))
    league_type = db.Column(db.String(100))
    category = db.Column(db.String(50))  # Indoor / Beach
    gender = db.Column(db.String(20))

    def to_dict(self):
        return {
            'id': self.id,
            'team_name': self.team_name,
            'location': self.location,
            'league_type': self.league_type,
            'category': self.category,
            'gender': self.gender,
        }

    def __repr__(self): return f'<Team {self.team_name} ({self.league_type}, {self.gender})>'
